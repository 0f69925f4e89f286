"""
Exception hierarchy for the CausaDB client.

All custom exceptions inherit from CausaDBError and carry an ``ErrorKind``
so callers can branch on the failure cause without matching messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of failure causes surfaced by the client."""

    AUTHENTICATION = "authentication"
    SERVER_REQUEST = "server_request"
    NOT_FOUND = "not_found"
    FILE_READ = "file_read"
    CONFIGURATION = "configuration"


class CausaDBError(Exception):
    """Base exception for all CausaDB client errors."""

    kind: ErrorKind = ErrorKind.SERVER_REQUEST


class AuthenticationError(CausaDBError):
    """Raised when the service rejects a token on the account check."""

    kind = ErrorKind.AUTHENTICATION


class ServerRequestError(CausaDBError):
    """Raised when a request to the service fails or returns a non-success status."""

    kind = ErrorKind.SERVER_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ServerRequestError):
    """Raised when a named model or data resource does not exist."""

    kind = ErrorKind.NOT_FOUND


# Local file errors
class FileReadError(CausaDBError):
    """Raised when reading or parsing a local data file fails."""

    kind = ErrorKind.FILE_READ


# Configuration errors
class ConfigurationError(CausaDBError):
    """Base exception for configuration-related errors."""

    kind = ErrorKind.CONFIGURATION


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
