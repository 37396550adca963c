"""JSON-RPC client over httpx."""

from __future__ import annotations

import itertools
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from eth_utils import decode_hex, encode_hex
from pydantic import BaseModel

from crossname.core.exceptions import RpcError

logger = logging.getLogger(__name__)


class RpcConfig(BaseModel):
    """Configuration for a JSON-RPC endpoint."""

    url: str
    timeout: float = 30.0


class JsonRpcClient:
    """
    Minimal async Ethereum JSON-RPC client.

    Provides:
    - HTTP client management with connection pooling
    - JSON-RPC envelope handling
    - Consistent error handling (every failure surfaces as RpcError)
    """

    def __init__(self, config: RpcConfig) -> None:
        self.config = config
        self._client: httpx.AsyncClient | None = None
        self._ids = itertools.count(1)

    @property
    def url(self) -> str:
        return self.config.url

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise RpcError(message=f"HTTP error: {e}", url=self.url) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "crossname/0.1",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, params: list[Any]) -> Any:
        """
        Send a JSON-RPC request and return its `result`.

        Raises:
            RpcError: On transport failures, non-2xx responses, malformed
                bodies and JSON-RPC error objects
        """
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        logger.debug("JSON-RPC %s -> %s", method, self.url)

        async with self._get_client() as client:
            response = await client.post(self.url, json=payload)

        if not response.is_success:
            raise RpcError(
                message=f"JSON-RPC endpoint returned HTTP {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise RpcError(
                message="JSON-RPC endpoint returned a non-JSON body",
                url=self.url,
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise RpcError(message="Malformed JSON-RPC response", url=self.url)
        if error := body.get("error"):
            raise RpcError(
                message=f"JSON-RPC error: {error.get('message', error) if isinstance(error, dict) else error}",
                url=self.url,
                status_code=response.status_code,
                details={"error": error},
            )
        if "result" not in body:
            raise RpcError(message="JSON-RPC response has no result", url=self.url)
        return body["result"]

    async def eth_call(self, to: str, data: bytes, block: str = "latest") -> bytes:
        """Execute a read-only contract call and return the raw return data."""
        result = await self.request("eth_call", [{"to": to, "data": encode_hex(data)}, block])
        try:
            return decode_hex(result)
        except (TypeError, ValueError) as e:
            raise RpcError(message=f"Malformed eth_call result: {result!r}", url=self.url) from e

    async def __aenter__(self) -> JsonRpcClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
