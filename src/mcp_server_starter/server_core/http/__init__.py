"""HTTP client base shared by the upstream service wrappers."""

from .client import JsonApiClient

__all__ = ["JsonApiClient"]
