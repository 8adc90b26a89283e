"""Shared async JSON-over-HTTP client used by the service wrappers."""

from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import RemoteServiceError
from ..logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JsonApiClient:
    """
    Issues a single GET request per call and decodes the JSON body.

    Subclasses supply the service name and the headers they need. A fresh
    ``httpx.AsyncClient`` is opened for every request, so calls share no state.
    """

    service_name: str = "HTTP"

    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        """Initialize the client.

        Args:
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        """Headers attached to every request."""
        return {}

    async def get_json(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Fetch ``url`` and return the decoded JSON payload.

        Args:
            url: Absolute URL to fetch.
            params: Optional query parameters.

        Returns:
            The parsed JSON body.

        Raises:
            RemoteServiceError: On a non-2xx status, a transport failure, or a body that is not JSON.
        """
        logger.debug("%s GET %s params=%s", self.service_name, url, params)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self._headers(), params=params)
        except httpx.RequestError as e:
            msg = f"{self.service_name} API request failed: {type(e).__name__}: {e}"
            logger.warning(msg)
            raise RemoteServiceError(self.service_name, status_text=str(e), message=msg) from e

        if not response.is_success:
            logger.warning("%s request to %s failed with HTTP %s", self.service_name, url, response.status_code)
            raise RemoteServiceError(self.service_name, response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as e:
            msg = f"{self.service_name} API returned a response that is not valid JSON."
            logger.warning(msg)
            raise RemoteServiceError(
                self.service_name, response.status_code, response.reason_phrase, message=msg
            ) from e

    async def get_model(self, url: str, model: Type[ModelT], params: Optional[Mapping[str, Any]] = None) -> ModelT:
        """Fetch ``url`` and decode the JSON payload into ``model``.

        Raises:
            RemoteServiceError: If the request fails or the payload does not have the expected shape.
        """
        payload = await self.get_json(url, params=params)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            msg = f"{self.service_name} API returned an unexpected response shape ({model.__name__})."
            logger.warning("%s: %s", msg, e)
            raise RemoteServiceError(self.service_name, message=msg) from e
