"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Data handle and CSV ingestion.

A :class:`Data` handle names a dataset on the CausaDB service. Loading a
local CSV parses it into row records first, so a malformed file fails with
:class:`~causadb.exceptions.FileReadError` before anything is sent.
"""

from __future__ import annotations

import csv
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Union

from causadb.adapters.base import resource_path
from causadb.exceptions import FileReadError
from causadb.logging_config import get_logger

if TYPE_CHECKING:
    from causadb.client import CausaDB

logger = get_logger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


def _coerce_cell(value: str) -> Optional[Union[int, float, str]]:
    """Convert a raw CSV cell to int, float or None where it looks like one."""
    stripped = value.strip()
    if stripped == "":
        return None
    if _INT_RE.match(stripped):
        return int(stripped)
    if _FLOAT_RE.match(stripped):
        number = float(stripped)
        if math.isfinite(number):
            return number
    return value


def parse_csv(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Parse a CSV file into row records keyed by the header.

    Args:
        path: Path to a CSV file with a header row.

    Returns:
        One mapping per data row, in file order.

    Raises:
        FileReadError: If the file cannot be read, has no header, has
            duplicate column names, or contains a row whose field count
            differs from the header.
    """
    path = Path(path)
    records: List[Dict[str, Any]] = []

    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f, strict=True)
            fieldnames = reader.fieldnames
            if not fieldnames:
                raise FileReadError(f"CSV file '{path}' has no header row")
            if len(set(fieldnames)) != len(fieldnames):
                raise FileReadError(f"CSV file '{path}' has duplicate column names")

            for row in reader:
                # DictReader files extra fields under None and fills missing ones with None
                if None in row or any(value is None for value in row.values()):
                    raise FileReadError(
                        f"CSV file '{path}' line {reader.line_num}: "
                        f"expected {len(fieldnames)} fields"
                    )
                records.append({key: _coerce_cell(value) for key, value in row.items()})
    except OSError as e:
        logger.error(f"Failed to read CSV file '{path}': {e}")
        raise FileReadError(f"Failed to read CSV file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise FileReadError(f"CSV file '{path}' is not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise FileReadError(
            f"Malformed CSV file '{path}' at line {reader.line_num}: {e}"
        ) from e

    logger.debug(f"Parsed {len(records)} rows from {path}")
    return records


@dataclass(frozen=True)
class Data:
    """Named reference to a dataset on the CausaDB service."""

    name: str
    client: CausaDB = field(repr=False, compare=False)

    async def from_records(self, records: Iterable[Mapping[str, Any]]) -> Data:
        """Upload row records under this handle's name.

        Raises:
            ServerRequestError: If the upload is rejected or fails.
        """
        rows = [dict(record) for record in records]
        request = self.client._build_request(
            "POST", resource_path("data", self.name), body={"data": rows}
        )
        response = await self.client._execute(request)
        self.client._require_success(response, f"upload data '{self.name}'")

        logger.info(f"Uploaded {len(rows)} rows to data {self.name}")
        return self

    async def from_csv(self, path: Union[str, Path]) -> Data:
        """Load a local CSV file and upload its rows under this handle's name.

        Raises:
            FileReadError: If the file cannot be parsed. No request is made.
            ServerRequestError: If the upload is rejected or fails.
        """
        records = parse_csv(path)
        return await self.from_records(records)
