"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Transport adapters.
"""

from causadb.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from causadb.adapters.http import HttpAdapter
from causadb.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "SDKRequest",
    "SDKResponse",
    "HttpAdapter",
    "MockAdapter",
]
