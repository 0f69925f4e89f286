"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Model handle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from causadb.adapters.base import resource_path
from causadb.logging_config import get_logger

if TYPE_CHECKING:
    from causadb.client import CausaDB

logger = get_logger(__name__)


@dataclass(frozen=True)
class Model:
    """Named reference to a model on the CausaDB service.

    Handles are compared by name only. The client is kept so later calls
    can reuse its token.
    """

    name: str
    client: CausaDB = field(repr=False, compare=False)

    @classmethod
    async def create(cls, model_name: str, client: CausaDB) -> Model:
        """Create a model on the service and return a handle to it.

        The name is sent as-is; the service validates it.

        Raises:
            ServerRequestError: If the create call fails.
        """
        request = client._build_request("POST", resource_path("models", model_name))
        response = await client._execute(request)
        client._require_success(response, f"create model '{model_name}'")

        logger.info(f"Created model {model_name}")
        return cls(model_name, client)
