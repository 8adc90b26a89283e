"""Export the exception hierarchy used across tool dispatch, HTTP clients and catalogs."""

from .exceptions import (
    ServerError,
    InvalidInputError,
    ConfigurationError,
    RemoteServiceError,
    NotFoundError,
    UnknownToolError,
    ToolRegistrationError,
)

__all__ = [
    "ServerError",
    "InvalidInputError",
    "ConfigurationError",
    "RemoteServiceError",
    "NotFoundError",
    "UnknownToolError",
    "ToolRegistrationError",
]
