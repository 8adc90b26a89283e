"""Read-only resource and prompt catalogs."""

from .prompts import PromptCatalog
from .resources import ResourceCatalog, ResourceContent

__all__ = ["PromptCatalog", "ResourceCatalog", "ResourceContent"]
