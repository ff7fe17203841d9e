from abc import ABC, abstractmethod
from typing import Any, List

from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction


class WalletAdapter(ABC):
    """Interface for wallets that hold the agent's signing authority."""

    @property
    @abstractmethod
    def public_key(self) -> Pubkey:
        """Get the wallet public key."""
        pass

    @abstractmethod
    async def sign_transaction(
        self, transaction: VersionedTransaction
    ) -> VersionedTransaction:
        """Sign a transaction with the wallet key."""
        pass

    @abstractmethod
    async def sign_message(self, message: bytes) -> Signature:
        """Sign arbitrary bytes with the wallet key."""
        pass

    @abstractmethod
    async def send_transaction(self, transaction: VersionedTransaction) -> str:
        """Send an already signed transaction, returning its signature."""
        pass

    @abstractmethod
    async def sign_all_transactions(
        self, transactions: List[VersionedTransaction]
    ) -> List[VersionedTransaction]:
        """Sign a batch of transactions."""
        pass

    @abstractmethod
    async def sign_and_send_transaction(
        self, transaction: VersionedTransaction
    ) -> Any:
        """Sign and send a transaction, returning ``{"signature": str}``."""
        pass
