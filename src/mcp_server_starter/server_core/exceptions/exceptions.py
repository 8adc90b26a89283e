"""
Custom exception classes for the MCP server.

This module defines the hierarchy of exceptions raised while validating tool
input, talking to the upstream HTTP services, and resolving tools, resources
and prompts by name.
"""

from typing import Optional


class ServerError(Exception):
    """Base exception for all server-side errors."""

    pass


class InvalidInputError(ServerError):
    """Raised when client-supplied arguments fail validation."""

    pass


class ConfigurationError(ServerError):
    """Raised when a required external-service setting is missing or malformed."""

    pass


class RemoteServiceError(ServerError):
    """Raised when an upstream HTTP call does not succeed.

    Attributes:
        service: Human-readable name of the upstream service.
        status_code: HTTP status code, or None if no response was received.
        status_text: HTTP reason phrase, or a short description of the failure.
    """

    def __init__(
        self, service: str, status_code: Optional[int] = None, status_text: str = "", message: Optional[str] = None
    ) -> None:
        self.service = service
        self.status_code = status_code
        self.status_text = status_text
        if message is None:
            message = f"{service} API error: HTTP {status_code} - {status_text}"
        super().__init__(message)


class NotFoundError(ServerError):
    """Raised when a resource URI or prompt name is not in the catalog."""

    pass


class UnknownToolError(NotFoundError):
    """Raised when a requested tool is not found in the registry."""

    pass


class ToolRegistrationError(ServerError):
    """Raised when there is an error registering a tool."""

    pass
