"""
Solana JSON-RPC adapter.

Thin async wrapper over the Solana JSON-RPC HTTP API (and the DAS extension
served by providers such as Helius) built on httpx.
"""

import asyncio
import base64
import itertools
import logging
from types import TracebackType
from typing import Any, Dict, List, Optional, Union

import httpx
from solders.hash import Hash
from solders.pubkey import Pubkey

from solana_agent_kit.domains.errors import RpcError, TransactionError

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
LAMPORTS_PER_SOL = 1_000_000_000

# Commitment levels ordered from weakest to strongest
_COMMITMENT_ORDER = ["processed", "confirmed", "finalized"]


class SolanaRpcAdapter:
    """Async JSON-RPC client for a Solana cluster.

    Usage::

        async with SolanaRpcAdapter("https://api.devnet.solana.com") as rpc:
            lamports = await rpc.get_balance(pubkey)
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        timeout: float = 30,
        http_client: Optional[httpx.AsyncClient] = None,
        commitment: str = "confirmed",
        confirm_timeout: float = 60,
        confirm_interval: float = 1,
    ) -> None:
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.confirm_timeout = confirm_timeout
        self.confirm_interval = confirm_interval
        self._timeout = timeout
        self._http_client = http_client
        self._ids = itertools.count(1)

    async def __aenter__(self) -> "SolanaRpcAdapter":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def request(
        self, method: str, params: Optional[Union[List[Any], Dict[str, Any]]] = None
    ) -> Any:
        """Perform a JSON-RPC call and return its ``result``.

        Raises:
            RpcError: on transport failures, non-2xx status or a JSON-RPC error object
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params if params is not None else [],
        }
        logger.debug(f"RPC request {method} to {self.rpc_url}")
        try:
            response = await self.http_client.post(self.rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise RpcError(f"RPC transport error calling {method}: {e}") from e

        if response.status_code == 429:
            raise RpcError(f"RPC rate limit exceeded calling {method}", code=429)
        if not response.is_success:
            raise RpcError(
                f"RPC HTTP {response.status_code} calling {method}: {response.text}",
                code=response.status_code,
            )

        body = response.json()
        if body.get("error"):
            error = body["error"]
            raise RpcError(
                error.get("message", f"RPC error calling {method}"),
                code=error.get("code"),
                data=error.get("data"),
            )
        return body.get("result")

    async def get_balance(self, pubkey: Union[Pubkey, str]) -> int:
        """Return the lamport balance of an account."""
        result = await self.request(
            "getBalance", [str(pubkey), {"commitment": self.commitment}]
        )
        return int(result["value"])

    async def get_token_accounts_by_owner(
        self, owner: Union[Pubkey, str], mint: Union[Pubkey, str]
    ) -> List[Dict[str, Any]]:
        """Return the jsonParsed token accounts an owner holds for a mint."""
        result = await self.request(
            "getTokenAccountsByOwner",
            [
                str(owner),
                {"mint": str(mint)},
                {"encoding": "jsonParsed", "commitment": self.commitment},
            ],
        )
        return result["value"]

    async def get_token_balance(
        self, owner: Union[Pubkey, str], mint: Union[Pubkey, str]
    ) -> float:
        """Return the UI token balance an owner holds for a mint, summed over accounts."""
        accounts = await self.get_token_accounts_by_owner(owner, mint)
        total = 0.0
        for account in accounts:
            amount = account["account"]["data"]["parsed"]["info"]["tokenAmount"]
            total += float(amount.get("uiAmount") or 0)
        return total

    async def get_token_decimals(self, mint: Union[Pubkey, str]) -> int:
        result = await self.request("getTokenSupply", [str(mint)])
        return int(result["value"]["decimals"])

    async def get_latest_blockhash(self) -> Hash:
        result = await self.request(
            "getLatestBlockhash", [{"commitment": self.commitment}]
        )
        return Hash.from_string(result["value"]["blockhash"])

    async def send_raw_transaction(
        self, raw: bytes, skip_preflight: bool = False, max_retries: int = 3
    ) -> str:
        """Submit a serialized signed transaction and return its signature."""
        encoded = base64.b64encode(raw).decode("utf-8")
        return await self.request(
            "sendTransaction",
            [
                encoded,
                {
                    "encoding": "base64",
                    "skipPreflight": skip_preflight,
                    "maxRetries": max_retries,
                    "preflightCommitment": self.commitment,
                },
            ],
        )

    async def get_signature_statuses(
        self, signatures: List[str]
    ) -> List[Optional[Dict[str, Any]]]:
        result = await self.request(
            "getSignatureStatuses",
            [signatures, {"searchTransactionHistory": True}],
        )
        return result["value"]

    async def confirm_transaction(self, signature: str) -> Dict[str, Any]:
        """Poll until the signature reaches the configured commitment.

        Raises:
            TransactionError: if the transaction failed or was not confirmed in time
        """
        target = _COMMITMENT_ORDER.index(self.commitment)
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.confirm_timeout

        while True:
            statuses = await self.get_signature_statuses([signature])
            status = statuses[0] if statuses else None
            if status is not None:
                if status.get("err"):
                    raise TransactionError(
                        f"Transaction {signature} failed: {status['err']}",
                        signature=signature,
                    )
                reached = status.get("confirmationStatus") or "processed"
                if _COMMITMENT_ORDER.index(reached) >= target:
                    logger.info(f"Transaction {signature} reached {reached}")
                    return status

            if loop.time() >= deadline:
                raise TransactionError(
                    f"Transaction {signature} not confirmed within {self.confirm_timeout}s",
                    signature=signature,
                )
            await asyncio.sleep(self.confirm_interval)

    async def request_airdrop(self, pubkey: Union[Pubkey, str], lamports: int) -> str:
        return await self.request(
            "requestAirdrop",
            [str(pubkey), lamports, {"commitment": self.commitment}],
        )

    async def get_recent_performance_samples(self, limit: int = 1) -> List[Dict[str, Any]]:
        return await self.request("getRecentPerformanceSamples", [limit])

    async def get_asset(self, asset_id: str) -> Dict[str, Any]:
        """Fetch an asset through the Digital Asset Standard ``getAsset`` method."""
        return await self.request("getAsset", {"id": asset_id})
