"""OAuthClient — authorization URLs, code exchange, and deauthorization.

Connects third-party accounts to a platform through the connect OAuth
endpoints. The client is immutable: config and executor are fixed at
construction, so one instance can be shared across threads.
"""

from __future__ import annotations

import logging
from typing import Any

from connect_oauth.config import BaseAddress, OAuthConfig, RequestOptions
from connect_oauth.encoding import encode_query
from connect_oauth.errors import AuthenticationError, InvalidRequestError
from connect_oauth.executor import ApiRequest, LiveRequestExecutor, RequestExecutor, RequestMethod
from connect_oauth.models import DeauthorizedAccount, TokenResponse

logger = logging.getLogger("connect_oauth.client")

_MISSING_CLIENT_ID = (
    "No client_id provided. (HINT: set the fallback with "
    "OAuthClient(OAuthConfig(client_id=<CLIENT-ID>)), or pass it per request via "
    "RequestOptions(client_id=...) or params['client_id']. You can find your "
    "client_ids in your dashboard under application settings, after registering "
    "your account as a platform. Email support@example.com if you have any "
    "questions.)"
)


def resolve_client_id(
    params: dict[str, Any] | None,
    options: RequestOptions | None,
    config: OAuthConfig,
) -> str:
    """Pick the client_id for an OAuth request.

    Later sources win: ``config.client_id``, then ``options.client_id``, then
    ``params["client_id"]``. Empty values are skipped.

    Raises:
        AuthenticationError: If no source provides a client_id.
        InvalidRequestError: If the winning client_id is not a string.
    """
    client_id = config.client_id
    if options is not None and options.client_id:
        client_id = options.client_id
    if params is not None:
        explicit = params.get("client_id")
        if explicit is not None and not isinstance(explicit, str):
            raise InvalidRequestError(
                f"client_id must be a string, got {type(explicit).__name__}",
                param="client_id",
            )
        if explicit:
            client_id = explicit

    if not client_id:
        raise AuthenticationError(_MISSING_CLIENT_ID)
    if not isinstance(client_id, str):
        raise InvalidRequestError(
            f"client_id must be a string, got {type(client_id).__name__}",
            param="client_id",
        )
    return client_id


class OAuthClient:
    """Connect OAuth operations against a configured platform.

    Args:
        config: Client-wide settings (fallback client_id, API key, base URLs).
        executor: Sends token and deauthorize requests. Defaults to a
            LiveRequestExecutor built from ``config``. An executor passed in
            stays owned by the caller; ``close()`` only releases the default one.

    Example::

        client = OAuthClient(OAuthConfig(client_id="ca_123", api_key="sk_live_..."))
        url = client.authorize_url({"scope": "read_write", "state": state})
        token = client.exchange_token({"grant_type": "authorization_code", "code": code})
        client.deauthorize({"account_id": token.account_id})
    """

    def __init__(
        self,
        config: OAuthConfig | None = None,
        *,
        executor: RequestExecutor | None = None,
    ) -> None:
        self._config = config or OAuthConfig()
        self._owns_executor = executor is None
        self._executor = executor if executor is not None else LiveRequestExecutor(self._config)

    @property
    def config(self) -> OAuthConfig:
        return self._config

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    def close(self) -> None:
        """Release the executor this client created. Injected executors are left open."""
        if self._owns_executor:
            self._executor.close()  # type: ignore[attr-defined]

    def __enter__(self) -> OAuthClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def authorize_url(
        self,
        params: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> str:
        """Build the URL of the OAuth authorization form.

        Writes the resolved ``client_id`` into ``params`` and defaults
        ``response_type`` to ``"code"``. The caller's dict is modified.

        Raises:
            AuthenticationError: If no client_id can be resolved.
            InvalidRequestError: If a parameter cannot be form-encoded.
        """
        if params is None:
            params = {}
        base = self._config.base_for(BaseAddress.CONNECT, options)

        params["client_id"] = resolve_client_id(params, options, self._config)
        if params.get("response_type") is None:
            params["response_type"] = "code"

        url = f"{base}/oauth/authorize?{encode_query(params)}"
        logger.debug("Built authorize URL for client_id=%s", params["client_id"])
        return url

    def exchange_token(
        self,
        params: dict[str, Any],
        options: RequestOptions | None = None,
    ) -> TokenResponse:
        """Exchange an authorization code for the connected account's credentials.

        ``params`` is sent as-is (typically ``grant_type`` and ``code``); the
        code authenticates the exchange, so no client_id is added.
        """
        request = ApiRequest(
            BaseAddress.CONNECT, RequestMethod.POST, "/oauth/token", params, options,
        )
        return self._executor.execute(request, TokenResponse)

    def deauthorize(
        self,
        params: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> DeauthorizedAccount:
        """Disconnect an account from the platform.

        Sends a copy of ``params`` with the resolved ``client_id``; the
        caller's dict is left untouched.

        Raises:
            AuthenticationError: If no client_id can be resolved.
        """
        params_copy = dict(params or {})
        params_copy["client_id"] = resolve_client_id(params_copy, options, self._config)

        request = ApiRequest(
            BaseAddress.CONNECT, RequestMethod.POST, "/oauth/deauthorize", params_copy, options,
        )
        return self._executor.execute(request, DeauthorizedAccount)
