"""Request execution — the seam between the OAuth client and the network.

OAuthClient only builds ApiRequest descriptions; a RequestExecutor sends them
and decodes the response. LiveRequestExecutor is the httpx-backed default.
Tests pass their own executor to OAuthClient instead.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

import httpx

from connect_oauth.config import BaseAddress, OAuthConfig, RequestOptions
from connect_oauth.encoding import encode_query
from connect_oauth.errors import APIConnectionError, APIError, oauth_error_from_response

logger = logging.getLogger("connect_oauth.executor")

T = TypeVar("T")


class RequestMethod(enum.Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """Everything an executor needs to send one request."""

    base_address: BaseAddress
    method: RequestMethod
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    options: RequestOptions | None = None


class RequestExecutor(Protocol):
    """Sends an ApiRequest and decodes the response into ``result_type``.

    Implementations own transport, decoding, and error classification.
    Their errors reach the caller of OAuthClient unmodified.
    """

    def execute(self, request: ApiRequest, result_type: type[T]) -> T: ...


class LiveRequestExecutor:
    """Sends requests over HTTP with a shared httpx.Client.

    Params go out form-encoded, as the query string for GET/DELETE and as
    the body for POST. JSON responses are decoded with
    ``result_type.from_dict``.

    Args:
        config: Base URLs, API key, and timeout.
        http_timeout: Overrides ``config.timeout`` when given.
    """

    def __init__(
        self,
        config: OAuthConfig | None = None,
        *,
        http_timeout: float | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or OAuthConfig()
        kwargs: dict = {
            "timeout": http_timeout if http_timeout is not None else self._config.timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.Client(**kwargs)

    def close(self) -> None:
        self._client.close()

    def execute(self, request: ApiRequest, result_type: type[T]) -> T:
        """Send the request and decode the response.

        Raises:
            APIConnectionError: If no response was received.
            OAuthApiError: If the endpoint answered with an OAuth ``error``.
            APIError: For any other error or undecodable response.
        """
        base = self._config.base_for(request.base_address, request.options)
        url = base + request.path
        headers = {"Accept": "application/json"}
        api_key = self._config.api_key_for(request.options)
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        encoded = encode_query(request.params)
        content: str | None = None
        if request.method is RequestMethod.POST:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            content = encoded
        elif encoded:
            url = f"{url}?{encoded}"

        logger.debug("Sending %s %s", request.method.value, request.path)
        try:
            response = self._client.request(
                request.method.value, url, content=content, headers=headers,
            )
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", request.path, e)
            raise APIConnectionError(
                f"Could not connect to {base}: {e}",
            ) from e

        data = self._decode(response)
        return result_type.from_dict(data)  # type: ignore[attr-defined]

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        """Return the JSON object body, or raise the classified error."""
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            logger.warning(
                "%s %s returned %d",
                response.request.method, response.request.url.path, response.status_code,
            )
            if isinstance(data, dict):
                error = data.get("error")
                if isinstance(error, str):
                    raise oauth_error_from_response(response.status_code, data)
                if isinstance(error, dict):
                    raise APIError(
                        error.get("message") or "Request failed",
                        code=error.get("type"),
                        status_code=response.status_code,
                    )
            raise APIError(
                f"Request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            raise APIError(
                "Response body is not a JSON object",
                status_code=response.status_code,
            )
        return data
