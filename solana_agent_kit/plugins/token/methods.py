"""
Token plugin methods: balances, transfers, faucet and network throughput.
"""

import logging
import struct
from typing import Optional

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer as system_transfer

from solana_agent_kit.adapters.rpc_adapter import LAMPORTS_PER_SOL
from solana_agent_kit.domains.tokens import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from solana_agent_kit.services.transactions import build_transaction, send_and_confirm

# Setup logger for this module
logger = logging.getLogger(__name__)

FAUCET_AIRDROP_SOL = 5

# SPL token program instruction tags
_TRANSFER_CHECKED = 12
# Associated token account program instruction tags
_CREATE_IDEMPOTENT = 1


def get_associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    address, _ = Pubkey.find_program_address(
        [bytes(owner), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    return address


def create_associated_token_account_idempotent(
    payer: Pubkey, owner: Pubkey, mint: Pubkey
) -> Instruction:
    return Instruction(
        ASSOCIATED_TOKEN_PROGRAM_ID,
        bytes([_CREATE_IDEMPOTENT]),
        [
            AccountMeta(payer, is_signer=True, is_writable=True),
            AccountMeta(
                get_associated_token_address(owner, mint),
                is_signer=False,
                is_writable=True,
            ),
            AccountMeta(owner, is_signer=False, is_writable=False),
            AccountMeta(mint, is_signer=False, is_writable=False),
            AccountMeta(SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
            AccountMeta(TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
        ],
    )


def transfer_checked(
    source: Pubkey,
    mint: Pubkey,
    destination: Pubkey,
    owner: Pubkey,
    amount: int,
    decimals: int,
) -> Instruction:
    return Instruction(
        TOKEN_PROGRAM_ID,
        struct.pack("<BQB", _TRANSFER_CHECKED, amount, decimals),
        [
            AccountMeta(source, is_signer=False, is_writable=True),
            AccountMeta(mint, is_signer=False, is_writable=False),
            AccountMeta(destination, is_signer=False, is_writable=True),
            AccountMeta(owner, is_signer=True, is_writable=False),
        ],
    )


async def get_wallet_address(agent) -> str:
    return str(agent.wallet.public_key)


async def get_balance(agent, token_address: Optional[str] = None) -> float:
    """Balance of the agent wallet in SOL, or in UI units of an SPL token."""
    owner = agent.wallet.public_key
    if token_address is None:
        lamports = await agent.connection.get_balance(owner)
        return lamports / LAMPORTS_PER_SOL
    return await agent.connection.get_token_balance(owner, token_address)


async def transfer(
    agent, to: str, amount: float, mint: Optional[str] = None
) -> str:
    """Transfer SOL, or an SPL token when ``mint`` is given.

    Returns:
        The confirmed transaction signature
    """
    sender = agent.wallet.public_key
    recipient = Pubkey.from_string(to)

    if mint is None:
        instructions = [
            system_transfer(
                TransferParams(
                    from_pubkey=sender,
                    to_pubkey=recipient,
                    lamports=int(round(amount * LAMPORTS_PER_SOL)),
                )
            )
        ]
    else:
        mint_key = Pubkey.from_string(mint)
        decimals = await agent.connection.get_token_decimals(mint_key)
        instructions = [
            create_associated_token_account_idempotent(sender, recipient, mint_key),
            transfer_checked(
                get_associated_token_address(sender, mint_key),
                mint_key,
                get_associated_token_address(recipient, mint_key),
                sender,
                int(round(amount * 10**decimals)),
                decimals,
            ),
        ]

    transaction = await build_transaction(agent, instructions)
    signature = await send_and_confirm(agent, transaction)
    logger.info(f"Transferred {amount} {mint or 'SOL'} to {to}: {signature}")
    return signature


async def request_faucet_funds(agent) -> str:
    """Request a devnet/testnet airdrop to the agent wallet."""
    signature = await agent.connection.request_airdrop(
        agent.wallet.public_key, FAUCET_AIRDROP_SOL * LAMPORTS_PER_SOL
    )
    await agent.connection.confirm_transaction(signature)
    return signature


async def get_tps(agent) -> float:
    """Current network transactions per second from the latest performance sample."""
    samples = await agent.connection.get_recent_performance_samples(1)
    if not samples:
        raise ValueError("No performance samples available")
    sample = samples[0]
    if not sample.get("samplePeriodSecs"):
        raise ValueError("Performance sample has no sampling period")
    return sample["numTransactions"] / sample["samplePeriodSecs"]
