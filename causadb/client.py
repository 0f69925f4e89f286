"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

CausaDB client.

Holds the account token, verifies it against the service, and acts as the
factory for :class:`~causadb.model.Model` and :class:`~causadb.data.Data`
handles::

    async with CausaDB() as client:
        await client.set_token("my-token-secret")
        model = await client.create_model("my-model")
        data = client.add_data("my-data")
        await data.from_csv("observations.csv")
"""

from __future__ import annotations

from typing import Any, List, Optional

from causadb.adapters.base import BaseAdapter, SDKRequest, SDKResponse, resource_path
from causadb.adapters.http import HttpAdapter
from causadb.config.settings import CausaDBConfig, load_config, with_env_overrides
from causadb.data import Data
from causadb.exceptions import AuthenticationError, NotFoundError, ServerRequestError
from causadb.logging_config import get_logger, log_authentication_failure
from causadb.model import Model

logger = get_logger(__name__)


def _names_from_listing(body: Any, key: str) -> List[str]:
    """Extract resource names from a ``{key: [{"name": ...}, ...]}`` body."""
    try:
        names = [spec["name"] for spec in body[key]]
    except (KeyError, TypeError) as exc:
        raise ServerRequestError(
            f"CausaDB server returned a malformed {key} listing"
        ) from exc

    if not all(isinstance(name, str) for name in names):
        raise ServerRequestError(
            f"CausaDB server returned a malformed {key} listing: non-string name"
        )
    return names


class CausaDB:
    """Client for the CausaDB cloud service.

    Args:
        base_url: Root URL of the CausaDB API. Falls back to ``CAUSADB_URL``,
            then the config file, then ``https://api.causadb.com/v1``.
        adapter: Optional custom transport adapter (overrides the default
            ``HttpAdapter``).
        config: Preloaded configuration. Loaded from disk when omitted.
            ``CAUSADB_URL`` and ``CAUSADB_TIMEOUT`` still apply on top of it.
        timeout: Request timeout in seconds for the default adapter.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        adapter: Optional[BaseAdapter] = None,
        config: Optional[CausaDBConfig] = None,
        timeout: Optional[float] = None,
    ) -> None:
        config = with_env_overrides(config) if config is not None else load_config()

        self.token_secret: Optional[str] = None
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self._adapter = adapter or HttpAdapter(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else config.api.timeout,
        )
        logger.debug(f"CausaDB client initialized with base_url={self.base_url}")

    @property
    def is_authenticated(self) -> bool:
        """Whether a token has been accepted by the service."""
        return self.token_secret is not None

    # -- Request plumbing --------------------------------------------------

    def _build_request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> SDKRequest:
        secret = self.token_secret if token is None else token
        return SDKRequest(
            method=method, path=path, headers={"token": secret or ""}, body=body
        )

    async def _execute(self, request: SDKRequest) -> SDKResponse:
        return await self._adapter.send(request)

    def _require_success(self, response: SDKResponse, action: str) -> None:
        if response.ok:
            return
        logger.error(f"{action} failed with HTTP {response.status_code}")
        raise ServerRequestError(
            f"CausaDB server request failed: {action} returned HTTP {response.status_code}",
            status_code=response.status_code,
        )

    # -- Authentication ----------------------------------------------------

    async def set_token(self, token_secret: str) -> bool:
        """Verify a token against the account endpoint and store it.

        Args:
            token_secret: Token secret provided by CausaDB.

        Returns:
            ``True`` when the service accepts the token.

        Raises:
            AuthenticationError: If the secret cannot be sent as a header value,
                or the service responds with anything but 200.
            ServerRequestError: If the service could not be reached.
        """
        if not token_secret.isascii():
            log_authentication_failure(logger, reason="non-ASCII token")
            raise AuthenticationError("Invalid token: must contain only ASCII characters")

        request = self._build_request("GET", "/account", token=token_secret)
        response = await self._execute(request)

        if response.status_code != 200:
            log_authentication_failure(
                logger, status_code=response.status_code, reason="token rejected"
            )
            raise AuthenticationError("Invalid token")

        self.token_secret = token_secret
        logger.info("CausaDB token accepted")
        return True

    # -- Models ------------------------------------------------------------

    async def create_model(self, model_name: str) -> Model:
        """Create a model on the service and return its handle."""
        return await Model.create(model_name, self)

    async def get_model(self, model_name: str) -> Model:
        """Get a handle to an existing model.

        Raises:
            NotFoundError: If the service reports no such model (HTTP 404).
            ServerRequestError: On any other failed request.
        """
        request = self._build_request("GET", resource_path("models", model_name))
        response = await self._execute(request)

        if response.status_code == 404:
            raise NotFoundError(f"Model {model_name} not found", status_code=404)
        self._require_success(response, f"get model '{model_name}'")
        return Model(model_name, self)

    async def list_models(self) -> List[Model]:
        """List all models owned by the account, in service order."""
        response = await self._execute(self._build_request("GET", "/models"))
        self._require_success(response, "list models")
        return [Model(name, self) for name in _names_from_listing(response.body, "models")]

    # -- Data --------------------------------------------------------------

    def add_data(self, data_name: str) -> Data:
        """Create a local data handle. Nothing is sent until data is loaded into it."""
        return Data(data_name, self)

    async def get_data(self, data_name: str) -> Data:
        """Get a handle to existing data by checking the account's data listing.

        Raises:
            NotFoundError: If the listing does not include ``data_name``.
            ServerRequestError: If the listing request fails.
        """
        response = await self._execute(self._build_request("GET", "/data"))
        self._require_success(response, "list data")

        if data_name not in _names_from_listing(response.body, "data"):
            raise NotFoundError(f"Data {data_name} not found")
        return Data(data_name, self)

    async def list_data(self) -> List[Data]:
        """List all data owned by the account, in service order."""
        response = await self._execute(self._build_request("GET", "/data"))
        self._require_success(response, "list data")
        return [Data(name, self) for name in _names_from_listing(response.body, "data")]

    # -- Lifecycle ---------------------------------------------------------

    async def close(self) -> None:
        """Release transport resources."""
        await self._adapter.close()
        logger.debug("CausaDB client closed")

    async def __aenter__(self) -> CausaDB:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
