"""Server configuration resolved from environment variables with fixed fallbacks."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, SecretStr

from .exceptions import ConfigurationError

DEFAULT_NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_NWS_USER_AGENT = "weather-app/1.0"
# Local development defaults; real deployments set GAROON_* explicitly.
DEFAULT_GAROON_BASE_URL = "http://localhost:8080/cgi-bin/cbgrn/grn.cgi/"
DEFAULT_GAROON_USERNAME = "Administrator"
DEFAULT_GAROON_PASSWORD = "cybozu"
DEFAULT_HTTP_TIMEOUT = 30.0


class WeatherConfig(BaseModel):
    """Settings for the National Weather Service API.

    Attributes:
        base_url: Root URL of the NWS API.
        user_agent: Value of the ``User-Agent`` header NWS requires on every call.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_NWS_BASE_URL
    user_agent: str = DEFAULT_NWS_USER_AGENT


class GaroonConfig(BaseModel):
    """Settings for the Garoon REST API.

    Attributes:
        base_url: Garoon root URL, e.g. ``https://example.cybozu.com/g/``.
        username: Login name used for Cybozu authentication.
        password: Password used for Cybozu authentication. Masked when dumped.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_GAROON_BASE_URL
    username: str = DEFAULT_GAROON_USERNAME
    password: SecretStr = SecretStr(DEFAULT_GAROON_PASSWORD)


class ServerConfig(BaseModel):
    """Complete, read-only configuration handed to every client and tool."""

    model_config = ConfigDict(frozen=True)

    nws: WeatherConfig = WeatherConfig()
    garoon: GaroonConfig = GaroonConfig()
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build the server configuration from environment variables.

    Unset or empty variables fall back to the module defaults, so the server is
    always runnable without configuration. Loading a ``.env`` file is left to
    the entry point.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The resolved ServerConfig.

    Raises:
        ConfigurationError: If HTTP_TIMEOUT is set but is not a positive number.
    """
    env = os.environ if environ is None else environ

    def _get(key: str, default: str) -> str:
        return env.get(key) or default

    raw_timeout = _get("HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
    try:
        http_timeout = float(raw_timeout)
    except ValueError as e:
        raise ConfigurationError(f"HTTP_TIMEOUT must be a number of seconds, got '{raw_timeout}'.") from e
    if http_timeout <= 0:
        raise ConfigurationError(f"HTTP_TIMEOUT must be positive, got '{raw_timeout}'.")

    return ServerConfig(
        nws=WeatherConfig(
            base_url=_get("NWS_BASE_URL", DEFAULT_NWS_BASE_URL),
            user_agent=_get("NWS_USER_AGENT", DEFAULT_NWS_USER_AGENT),
        ),
        garoon=GaroonConfig(
            base_url=_get("GAROON_BASE_URL", DEFAULT_GAROON_BASE_URL),
            username=_get("GAROON_USERNAME", DEFAULT_GAROON_USERNAME),
            password=SecretStr(_get("GAROON_PASSWORD", DEFAULT_GAROON_PASSWORD)),
        ),
        http_timeout=http_timeout,
    )
