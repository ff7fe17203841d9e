"""
Keypair-backed wallet adapter.

Signing is delegated entirely to solders; the adapter only wires the
keypair to the RPC connection for sending.
"""

import logging
from typing import Dict, List

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from solana_agent_kit.adapters.rpc_adapter import SolanaRpcAdapter
from solana_agent_kit.domains.errors import ConfigError
from solana_agent_kit.interfaces.providers.wallet import WalletAdapter

# Setup logger for this module
logger = logging.getLogger(__name__)


class KeypairWallet(WalletAdapter):
    """Wallet holding a local ed25519 keypair."""

    def __init__(self, keypair: Keypair, rpc: SolanaRpcAdapter):
        self._keypair = keypair
        self._rpc = rpc

    @classmethod
    def from_base58(cls, private_key: str, rpc: SolanaRpcAdapter) -> "KeypairWallet":
        """Build a wallet from a base58 encoded 64-byte secret key."""
        try:
            keypair = Keypair.from_base58_string(private_key)
        except Exception as e:
            raise ConfigError(f"Invalid Solana private key: {e}") from e
        return cls(keypair, rpc)

    @property
    def public_key(self) -> Pubkey:
        return self._keypair.pubkey()

    async def sign_transaction(
        self, transaction: VersionedTransaction
    ) -> VersionedTransaction:
        return VersionedTransaction(transaction.message, [self._keypair])

    async def sign_message(self, message: bytes) -> Signature:
        return self._keypair.sign_message(message)

    async def send_transaction(self, transaction: VersionedTransaction) -> str:
        signature = await self._rpc.send_raw_transaction(bytes(transaction))
        logger.info(f"Sent transaction {signature}")
        return signature

    async def sign_all_transactions(
        self, transactions: List[VersionedTransaction]
    ) -> List[VersionedTransaction]:
        return [await self.sign_transaction(tx) for tx in transactions]

    async def sign_and_send_transaction(
        self, transaction: VersionedTransaction
    ) -> Dict[str, str]:
        signed = await self.sign_transaction(transaction)
        return {"signature": await self.send_transaction(signed)}
