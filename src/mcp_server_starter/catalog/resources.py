"""Static, read-only resources addressable by URI."""

from dataclasses import dataclass
from typing import Callable, Dict, List

from mcp import types

from mcp_server_starter.server_core import NotFoundError, ServerConfig, get_logger

logger = get_logger(__name__)

CONFIG_URI = "config://settings"
ABOUT_URI = "info://about"
ABOUT_TEXT = "MCP Weather Server v1.0.0\nProvides weather forecasts and alerts."


@dataclass(frozen=True)
class ResourceContent:
    """The body of one resource read."""

    uri: str
    mime_type: str
    text: str


@dataclass(frozen=True)
class _Entry:
    name: str
    description: str
    mime_type: str
    render: Callable[[], str]


class ResourceCatalog:
    """Serves the configuration dump and the about text."""

    def __init__(self, config: ServerConfig) -> None:
        self._config = config
        self._entries: Dict[str, _Entry] = {
            CONFIG_URI: _Entry("Server Settings", "Current server configuration", "application/json", self._settings),
            ABOUT_URI: _Entry("About", "Information about this MCP server", "text/plain", lambda: ABOUT_TEXT),
        }

    def _settings(self) -> str:
        # SecretStr fields are dumped masked
        return self._config.model_dump_json(indent=2)

    def list_resources(self) -> List[types.Resource]:
        return [
            types.Resource(uri=uri, name=entry.name, description=entry.description, mimeType=entry.mime_type)
            for uri, entry in self._entries.items()
        ]

    def read_resource(self, uri: str) -> ResourceContent:
        """Render the resource at ``uri``.

        Raises:
            NotFoundError: If the URI is not in the catalog.
        """
        entry = self._entries.get(uri)
        if entry is None:
            logger.warning("Unknown resource requested: %s", uri)
            raise NotFoundError(f"Unknown resource: {uri}")
        return ResourceContent(uri=uri, mime_type=entry.mime_type, text=entry.render())
