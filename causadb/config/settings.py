"""
Configuration management for the CausaDB client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax, and
CAUSADB_URL / CAUSADB_TIMEOUT overrides applied on top of the file.
"""

import os
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from causadb.exceptions import InvalidConfigurationError
from causadb.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.causadb.com/v1"
DEFAULT_TIMEOUT = 30.0

URL_ENV_VAR = "CAUSADB_URL"
TIMEOUT_ENV_VAR = "CAUSADB_TIMEOUT"


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Examples:
        "${CAUSADB_HOST}" -> value of CAUSADB_HOST env var
        "https://${CAUSADB_HOST:api.causadb.com}/v1" -> expanded string
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class APIConfig:
    """Remote service configuration."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class CausaDBConfig:
    """Main CausaDB client configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.causadb/config.yaml")


def get_default_config() -> CausaDBConfig:
    """Get default configuration with environment overrides applied."""
    config = CausaDBConfig()
    _apply_env_overrides(config)
    return config


def load_config(config_path: Optional[str] = None) -> CausaDBConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        CausaDBConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _apply_env_overrides(config)
        _validate_config(config)
    except (TypeError, ValueError, InvalidConfigurationError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> CausaDBConfig:
    """Build configuration object from dictionary."""
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError("Configuration root must be a mapping")

    api_data = config_data.get("api") or {}
    logging_data = config_data.get("logging") or {}

    api = APIConfig(**api_data)
    api.timeout = float(api.timeout)

    logging_config = LoggingConfig(**logging_data)
    if isinstance(logging_config.json_format, str):
        logging_config.json_format = logging_config.json_format.lower() == "true"

    return CausaDBConfig(api=api, logging=logging_config)


def with_env_overrides(config: CausaDBConfig) -> CausaDBConfig:
    """Return a copy of ``config`` with CAUSADB_URL / CAUSADB_TIMEOUT applied.

    The caller's configuration is left untouched.
    """
    merged = replace(config, api=replace(config.api))
    _apply_env_overrides(merged)
    return merged


def _apply_env_overrides(config: CausaDBConfig) -> None:
    """Apply CAUSADB_URL / CAUSADB_TIMEOUT on top of file configuration."""
    env_url = os.environ.get(URL_ENV_VAR)
    if env_url:
        config.api.base_url = env_url

    env_timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if env_timeout:
        try:
            config.api.timeout = float(env_timeout)
        except ValueError as e:
            raise InvalidConfigurationError(
                f"{TIMEOUT_ENV_VAR} must be a number, got '{env_timeout}'"
            ) from e


def _validate_config(config: CausaDBConfig) -> None:
    """
    Validate configuration values.

    Raises:
        InvalidConfigurationError: If any value is out of range or malformed
    """
    parsed = urlparse(config.api.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidConfigurationError(
            f"api.base_url must be an absolute http(s) URL, got '{config.api.base_url}'"
        )

    if config.api.timeout <= 0:
        raise InvalidConfigurationError(
            f"api.timeout must be positive, got {config.api.timeout}"
        )

    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_levels:
        raise InvalidConfigurationError(
            f"logging.level must be one of {valid_levels}, got '{config.logging.level}'"
        )
