"""
Configuration management for the CausaDB client.

Handles loading and validation of configuration files.
"""

from causadb.config.settings import (
    APIConfig,
    CausaDBConfig,
    LoggingConfig,
    get_default_config,
    get_default_config_path,
    load_config,
    with_env_overrides,
)

__all__ = [
    "APIConfig",
    "CausaDBConfig",
    "LoggingConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
    "with_env_overrides",
]
