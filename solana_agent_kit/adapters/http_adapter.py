"""
HTTP adapter for third-party protocol APIs (Jupiter, Lulo, SNS...).

Wraps an httpx.AsyncClient and maps non-2xx answers to ProtocolApiError.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from solana_agent_kit.domains.errors import ProtocolApiError

# Setup logger for this module
logger = logging.getLogger(__name__)


class ProtocolHttpAdapter:
    """JSON over HTTP client shared by protocol plugins."""

    def __init__(
        self,
        timeout: float = 30,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self._send("GET", url, params=params, headers=headers)

    async def post_json(
        self,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self._send("POST", url, json=body, params=params, headers=headers)

    async def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug(f"{method} {url}")
        try:
            response = await self.http_client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ProtocolApiError(f"Request to {url} failed: {e}") from e

        if response.status_code == 429:
            raise ProtocolApiError(
                f"Rate limit exceeded calling {url}", status_code=429
            )
        if not response.is_success:
            raise ProtocolApiError(
                f"HTTP {response.status_code} from {url}: {response.text}",
                status_code=response.status_code,
            )
        return response.json()
