"""SuiNS Client - Async JSON-RPC client for SuiNS name lookups on a Sui fullnode."""

import asyncio
import itertools
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class NameRecord:
    """A SuiNS name and the address it points at (if any)."""
    name: str
    target_address: str | None = None


class SuinsRpcError(Exception):
    """The fullnode answered with a JSON-RPC error object."""

    def __init__(self, method: str, code: int | None, message: str):
        self.method = method
        self.code = code
        self.message = message
        super().__init__(f"{method} failed ({code}): {message}")


class SuinsClient:
    """Async client for SuiNS lookups over Sui JSON-RPC.

    Handles:
    - Retries with linear backoff on transport errors, 429 and 5xx
    - Forward lookup (name -> address) via suix_resolveNameServiceAddress
    - Reverse lookup (address -> names) via suix_resolveNameServiceNames

    Names are forwarded exactly as given; SuiNS handles case and subdomains.
    """

    def __init__(
        self,
        rpc_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        from ..config import SUI_RPC_URL, SUINS_MAX_RETRIES, SUINS_RETRY_DELAY, SUINS_TIMEOUT

        self.rpc_url = rpc_url or SUI_RPC_URL
        self.timeout = timeout if timeout is not None else SUINS_TIMEOUT
        self.max_retries = max(1, max_retries if max_retries is not None else SUINS_MAX_RETRIES)
        self.retry_delay = retry_delay if retry_delay is not None else SUINS_RETRY_DELAY
        self._transport = transport
        self._ids = itertools.count(1)
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SuinsClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json"},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _call(self, method: str, params: list[Any]) -> Any:
        """Make a JSON-RPC call with retries. Returns the 'result' member."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}

        for attempt in range(self.max_retries):
            try:
                response = await self._client.post(self.rpc_url, json=payload)
                response.raise_for_status()
                body = response.json()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status != 429 and status < 500:
                    raise
                logger.warning(
                    "suins_rpc_retry",
                    method=method,
                    status_code=status,
                    attempt=attempt + 1,
                )
                if attempt + 1 == self.max_retries:
                    raise
            except httpx.RequestError as e:
                logger.warning(
                    "suins_request_error",
                    method=method,
                    error=str(e),
                    attempt=attempt + 1,
                )
                if attempt + 1 == self.max_retries:
                    raise
            except ValueError as e:
                raise SuinsRpcError(method, None, "malformed response") from e
            else:
                if not isinstance(body, dict):
                    raise SuinsRpcError(method, None, "malformed response")
                error = body.get("error")
                if error:
                    raise SuinsRpcError(method, error.get("code"), error.get("message", ""))
                return body.get("result")

            await asyncio.sleep(self.retry_delay * (attempt + 1))

        raise RuntimeError(f"Failed to call {method} after {self.max_retries} attempts")

    async def get_name_record(self, name: str) -> NameRecord | None:
        """Look up the address a SuiNS name points at.

        Returns None when the name is not registered.
        """
        address = await self._call("suix_resolveNameServiceAddress", [name])
        if address is None:
            return None
        logger.debug("suins_name_fetched", name=name, address=address)
        return NameRecord(name=name, target_address=address or None)

    async def get_names(self, address: str, limit: int | None = None) -> list[str]:
        """Fetch the first page of SuiNS names resolving to an address."""
        params: list[Any] = [address, None, limit]
        result = await self._call("suix_resolveNameServiceNames", params)
        if not result:
            return []
        return [name for name in result.get("data", []) if isinstance(name, str)]
