"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Transport adapter base class and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote


@dataclass
class SDKRequest:
    """Outbound request representation."""
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    params: Optional[Dict[str, Any]] = None


@dataclass
class SDKResponse:
    """Inbound response representation."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300


class BaseAdapter(ABC):
    """Abstract base for all transport adapters."""

    @abstractmethod
    async def send(self, request: SDKRequest) -> SDKResponse:
        """Send a request and return the response.

        Implementations raise :class:`~causadb.exceptions.ServerRequestError`
        when no response could be obtained. Non-2xx statuses are returned,
        not raised.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...


def resource_path(collection: str, name: str) -> str:
    """Build ``/{collection}/{name}`` with the name percent-encoded as one segment."""
    return f"/{collection}/{quote(name, safe='')}"
