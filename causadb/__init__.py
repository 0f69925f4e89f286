"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

CausaDB - Python client for the CausaDB causal AI cloud service.

Quick start::

    from causadb import CausaDB

    client = CausaDB()
    await client.set_token("my-token-secret")
    models = await client.list_models()
"""

from causadb._version import __version__
from causadb.adapters import BaseAdapter, HttpAdapter, MockAdapter, SDKRequest, SDKResponse
from causadb.client import CausaDB
from causadb.data import Data, parse_csv
from causadb.exceptions import (
    AuthenticationError,
    CausaDBError,
    ConfigurationError,
    ErrorKind,
    FileReadError,
    InvalidConfigurationError,
    NotFoundError,
    ServerRequestError,
)
from causadb.model import Model

__all__ = [
    "__version__",
    # client
    "CausaDB",
    "Model",
    "Data",
    "parse_csv",
    # errors
    "ErrorKind",
    "CausaDBError",
    "AuthenticationError",
    "ServerRequestError",
    "NotFoundError",
    "FileReadError",
    "ConfigurationError",
    "InvalidConfigurationError",
    # transport
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "SDKRequest",
    "SDKResponse",
]
