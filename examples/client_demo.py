#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Demonstration of CausaDB client usage.

This script shows how to:
1. Load configuration, apply its logging section and initialize the client
2. Authenticate with a token
3. Create and list models
4. Register data from a CSV file

Set CAUSADB_TOKEN (and optionally CAUSADB_URL) before running.
"""

import asyncio
import os
import sys
import tempfile
from pathlib import Path

from causadb import CausaDB, CausaDBError
from causadb.config import CausaDBConfig, load_config
from causadb.logging_config import set_correlation_id, setup_logging_from_config


async def run(token: str, config: CausaDBConfig) -> None:
    async with CausaDB(config=config) as client:
        print(f"Connecting to {client.base_url}")
        await client.set_token(token)
        print("Token accepted")

        model = await client.create_model("demo-model")
        print(f"Created model: {model.name}")

        models = await client.list_models()
        print(f"Account has {len(models)} model(s): {[m.name for m in models]}")

        with tempfile.TemporaryDirectory() as temp_dir:
            csv_path = Path(temp_dir) / "demo.csv"
            csv_path.write_text(
                "advertising,price,sales\n"
                "10,5.0,100\n"
                "20,4.5,180\n"
                "15,5.5,130\n"
            )
            data = client.add_data("demo-data")
            await data.from_csv(csv_path)
            print(f"Uploaded {csv_path.name} as data '{data.name}'")

        fetched = await client.get_data("demo-data")
        print(f"Fetched data handle: {fetched}")


def main() -> int:
    """Run client demonstration."""
    token = os.environ.get("CAUSADB_TOKEN")
    if not token:
        print("CAUSADB_TOKEN environment variable not set", file=sys.stderr)
        return 1

    try:
        config = load_config()
    except CausaDBError as e:
        print(f"{e.kind.value}: {e}", file=sys.stderr)
        return 1

    setup_logging_from_config(config.logging)
    set_correlation_id()

    try:
        asyncio.run(run(token, config))
    except CausaDBError as e:
        print(f"{e.kind.value}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
