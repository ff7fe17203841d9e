"""
Transaction glue shared by plugins.

Every on-chain action follows the same sequence: build or receive a
transaction, sign it, send it and wait for confirmation.
"""

import base64
import logging
from typing import Any, Iterable, List

from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import MessageV0, to_bytes_versioned
from solders.transaction import VersionedTransaction

from solana_agent_kit.domains.errors import TransactionError

# Setup logger for this module
logger = logging.getLogger(__name__)


def deserialize_transaction(encoded: str) -> VersionedTransaction:
    """Decode a base64 serialized versioned transaction returned by a protocol API."""
    try:
        return VersionedTransaction.from_bytes(base64.b64decode(encoded))
    except Exception as e:
        raise TransactionError(f"Could not deserialize transaction: {e}") from e


async def build_transaction(
    agent: Any,
    instructions: List[Instruction],
    extra_signers: Iterable[Keypair] = (),
) -> VersionedTransaction:
    """Compile instructions into a v0 transaction paid and signed by the agent wallet.

    Additional keypairs (e.g. a freshly generated account) co-sign locally.
    """
    payer = agent.wallet.public_key
    blockhash = await agent.connection.get_latest_blockhash()
    message = MessageV0.try_compile(payer, instructions, [], blockhash)
    payload = to_bytes_versioned(message)

    extras = {kp.pubkey(): kp for kp in extra_signers}
    signer_keys = message.account_keys[: message.header.num_required_signatures]
    signatures = []
    for key in signer_keys:
        if key == payer:
            signatures.append(await agent.wallet.sign_message(payload))
        elif key in extras:
            signatures.append(extras[key].sign_message(payload))
        else:
            raise TransactionError(f"Missing signer for {key}")
    return VersionedTransaction.populate(message, signatures)


async def send_and_confirm(
    agent: Any, transaction: VersionedTransaction, sign: bool = False
) -> str:
    """Optionally sign with the wallet, send and wait for confirmation.

    Returns:
        The transaction signature
    """
    if sign:
        transaction = await agent.wallet.sign_transaction(transaction)
    signature = await agent.wallet.send_transaction(transaction)
    await agent.connection.confirm_transaction(signature)
    logger.info(f"Confirmed transaction {signature}")
    return signature
