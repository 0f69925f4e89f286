"""
Pytest configuration and shared fixtures for CausaDB client tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from causadb.adapters.base import SDKResponse
from causadb.adapters.mock import MockAdapter
from causadb.client import CausaDB
from causadb.config.settings import CausaDBConfig


TEST_TOKEN = "test-token-secret"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """Mock adapter that accepts TEST_TOKEN on the account endpoint."""
    return MockAdapter(responses={
        ("GET", "/account"): SDKResponse(status_code=200, body={"name": "test-account"}),
    })


@pytest.fixture
def client(mock_adapter: MockAdapter) -> CausaDB:
    """Unauthenticated client wired to the mock adapter."""
    return CausaDB(adapter=mock_adapter, config=CausaDBConfig())


@pytest.fixture
def sample_csv_path(temp_dir: Path) -> Path:
    """
    Create a well-formed CSV file for ingestion tests.
    
    Returns:
        Path to sample CSV file.
    """
    csv_path = temp_dir / "observations.csv"
    csv_path.write_text(
        "x,y,label\n"
        "1,2.5,treated\n"
        "3,,control\n"
    )
    return csv_path


@pytest.fixture
def ragged_csv_path(temp_dir: Path) -> Path:
    """Create a CSV file whose second data row has an extra field."""
    csv_path = temp_dir / "ragged.csv"
    csv_path.write_text(
        "x,y\n"
        "1,2\n"
        "3,4,5\n"
    )
    return csv_path


# Hypothesis settings for property-based tests
from hypothesis import settings, Verbosity

settings.register_profile("causadb", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("causadb-ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("causadb-dev", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "causadb"))
