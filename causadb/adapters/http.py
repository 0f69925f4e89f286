"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

HTTP/REST transport adapter (default).
"""

from __future__ import annotations

import time
from typing import Optional

import httpx

from causadb.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from causadb.exceptions import ServerRequestError
from causadb.logging_config import get_logger, log_server_request

logger = get_logger(__name__)


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    Args:
        base_url: Root URL of the CausaDB API (e.g. ``https://api.causadb.com/v1``).
        timeout: Request timeout in seconds, handed to httpx unchanged.
        transport: Optional httpx transport, used by tests to stub the network.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @property
    def base_url(self) -> str:
        return self._base_url

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=self._timeout,
                transport=self._transport,
            )
            self._connected = True
        return self._client

    async def send(self, request: SDKRequest) -> SDKResponse:
        client = self._ensure_client()
        start = time.monotonic()

        try:
            resp = await client.request(
                method=request.method,
                url=request.path,
                headers=request.headers,
                json=request.body,
                params=request.params,
            )
        except (httpx.HTTPError, UnicodeEncodeError) as exc:
            # httpx encodes header values as ASCII before sending
            logger.error(f"Request failed: {request.method} {request.path}: {exc}")
            raise ServerRequestError(
                f"CausaDB server request failed: {exc}"
            ) from exc

        elapsed = round((time.monotonic() - start) * 1000, 2)
        log_server_request(
            logger, request.method, request.path, resp.status_code, elapsed
        )

        try:
            body = resp.json() if resp.content else None
        except ValueError as exc:
            # JSONDecodeError, or UnicodeDecodeError for a non-UTF-8 body
            if not resp.is_success:
                body = resp.content.decode("utf-8", errors="replace")
            else:
                raise ServerRequestError(
                    f"CausaDB server returned invalid JSON: {exc}",
                    status_code=resp.status_code,
                ) from exc

        return SDKResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=body,
            elapsed_ms=elapsed,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
