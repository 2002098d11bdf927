"""HTTP transport for the Datadog API."""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .config import DatadogConfig
from .exceptions import APIError, DecodeError, TransportError, TransportTimeoutError
from .models.common import ErrorResponse


logger = logging.getLogger(__name__)

API_KEY_HEADER = "DD-API-KEY"
APPLICATION_KEY_HEADER = "DD-APPLICATION-KEY"

R = TypeVar("R", bound=BaseModel)

JsonBody = Union[BaseModel, Dict[str, Any], None]


class Client:
    """Low-level client for the Datadog REST API.

    Every operation performs exactly one authenticated HTTP exchange. The
    caller composes the path and query string; the client prefixes it with
    the configured host, attaches the two credential headers and, for the
    typed operations, turns the response into either a decoded model or an
    exception.

    There is no retry and no per-call timeout. To change connection
    behaviour pass a preconfigured ``httpx.AsyncClient``.

    Attributes:
        config: Datadog configuration
    """

    def __init__(self, config: DatadogConfig, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the client.

        Args:
            config: Host and credentials
            http_client: Optional HTTP client to send requests through; the
                caller keeps ownership of it
        """
        self.config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None

        logger.info(
            "Initialized Datadog API client",
            extra={
                "host": self.config.host,
                "api_key": self.config.api_key[:4] + "..."
            }
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Client":
        """Create a client from DATADOG_HOST, DD_API_KEY and DD_APP_KEY.

        Raises:
            ConfigurationError: If a credential is missing
        """
        return cls(DatadogConfig.from_env(env_file))

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client used for API requests."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                headers={
                    "User-Agent": f"datadog-api-python/{__version__}",
                    "Accept": "application/json"
                }
            )
        return self._http_client

    def _auth_headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            APPLICATION_KEY_HEADER: self.config.application_key
        }

    async def _send(
        self,
        method: str,
        path_and_query: str,
        content: Optional[str] = None,
        json_data: Any = None
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Raises:
            TransportTimeoutError: If the HTTP client timed out
            TransportError: If the request could not be completed
        """
        url = f"{self.config.host}{path_and_query}"
        headers = self._auth_headers()
        if content is not None or json_data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(
            f"Making {method} request to {path_and_query}",
            extra={
                "url": url,
                "has_body": content is not None or json_data is not None
            }
        )

        try:
            response = await self.http_client.request(
                method,
                url,
                content=content,
                json=json_data,
                headers=headers
            )
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"Request to {url} timed out",
                method=method,
                url=url
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Request to {url} failed: {e}",
                method=method,
                url=url,
                context={"error_type": type(e).__name__}
            ) from e

        logger.debug(
            "Received response",
            extra={
                "status_code": response.status_code,
                "response_size": len(response.content),
                "url": url
            }
        )
        return response

    @staticmethod
    def _serialize(body: JsonBody) -> Any:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return body

    def _resolve(self, response: httpx.Response, response_model: Type[R]) -> R:
        """Turn a response into the success model or raise the matching error.

        Raises:
            APIError: If the status is not 2xx and the error body decodes
            DecodeError: If the success or error body does not decode
        """
        body = response.text

        if response.is_success:
            try:
                return response_model.model_validate_json(body)
            except PydanticValidationError as e:
                raise DecodeError(
                    f"Failed to decode {response_model.__name__}: {e}",
                    status_code=response.status_code,
                    body=body,
                    model=response_model.__name__
                ) from e

        logger.debug(
            "Datadog API returned an error response",
            extra={
                "status_code": response.status_code,
                "body": body,
                "url": str(response.request.url)
            }
        )

        try:
            error = ErrorResponse.model_validate_json(body)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Failed to decode error response: {e}",
                status_code=response.status_code,
                body=body,
                model=ErrorResponse.__name__
            ) from e

        raise APIError(error.errors, status_code=response.status_code)

    # Raw operations

    async def get_raw(self, path_and_query: str) -> httpx.Response:
        return await self._send("GET", path_and_query)

    async def post_json(self, path_and_query: str, body: JsonBody) -> httpx.Response:
        return await self._send("POST", path_and_query, json_data=self._serialize(body))

    async def post_jsonstr(self, path_and_query: str, json_str: str) -> httpx.Response:
        return await self._send("POST", path_and_query, content=json_str)

    async def put_json(self, path_and_query: str, body: JsonBody) -> httpx.Response:
        return await self._send("PUT", path_and_query, json_data=self._serialize(body))

    async def put_jsonstr(self, path_and_query: str, json_str: str) -> httpx.Response:
        return await self._send("PUT", path_and_query, content=json_str)

    async def delete_json(self, path_and_query: str, body: JsonBody = None) -> httpx.Response:
        return await self._send("DELETE", path_and_query, json_data=self._serialize(body))

    async def delete_jsonstr(self, path_and_query: str, json_str: str) -> httpx.Response:
        return await self._send("DELETE", path_and_query, content=json_str)

    # Typed operations

    async def get(self, path_and_query: str, response_model: Type[R]) -> R:
        """GET ``path_and_query`` and decode the response as ``response_model``."""
        response = await self.get_raw(path_and_query)
        return self._resolve(response, response_model)

    async def post(self, path_and_query: str, body: JsonBody, response_model: Type[R]) -> R:
        """POST ``body`` serialized as JSON and decode the response."""
        response = await self.post_json(path_and_query, body)
        return self._resolve(response, response_model)

    async def post_str(self, path_and_query: str, json_str: str, response_model: Type[R]) -> R:
        """POST a pre-serialized JSON string and decode the response."""
        response = await self.post_jsonstr(path_and_query, json_str)
        return self._resolve(response, response_model)

    async def put(self, path_and_query: str, body: JsonBody, response_model: Type[R]) -> R:
        response = await self.put_json(path_and_query, body)
        return self._resolve(response, response_model)

    async def put_str(self, path_and_query: str, json_str: str, response_model: Type[R]) -> R:
        response = await self.put_jsonstr(path_and_query, json_str)
        return self._resolve(response, response_model)

    async def delete(self, path_and_query: str, response_model: Type[R], body: JsonBody = None) -> R:
        """DELETE ``path_and_query``, optionally with a JSON body."""
        response = await self.delete_json(path_and_query, body)
        return self._resolve(response, response_model)

    async def delete_str(self, path_and_query: str, json_str: str, response_model: Type[R]) -> R:
        response = await self.delete_jsonstr(path_and_query, json_str)
        return self._resolve(response, response_model)

    async def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

        logger.info("Datadog API client closed")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
