"""Error taxonomy for the connect OAuth client.

Every error carries a ``code`` string so callers can branch on the kind of
failure without matching on classes, and a ``retryable`` flag. Nothing in
this package retries; the flag is advice for the caller.
"""

from __future__ import annotations

from typing import Any, ClassVar


class ConnectOAuthError(Exception):
    """Base error with an error code and optional HTTP status."""

    default_code: ClassVar[str] = "connect_oauth_error"
    retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        **extra: Any,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code
        self.extra = extra
        super().__init__(message)


class AuthenticationError(ConnectOAuthError):
    """No usable client identifier or credentials. A configuration defect."""

    default_code = "authentication_error"


class InvalidRequestError(ConnectOAuthError):
    """Request parameters that cannot be sent (e.g. unencodable values)."""

    default_code = "invalid_request_error"

    def __init__(self, message: str, param: str | None = None, **kwargs: Any) -> None:
        self.param = param
        super().__init__(message, **kwargs)


class APIConnectionError(ConnectOAuthError):
    """The request never got a response (DNS, refused connection, timeout)."""

    default_code = "api_connection_error"
    retryable = True


class APIError(ConnectOAuthError):
    """Unexpected response from the remote service."""

    default_code = "api_error"

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code is not None and self.status_code >= 500


class OAuthApiError(ConnectOAuthError):
    """The OAuth endpoint rejected the request with an ``error`` response.

    ``code`` is the OAuth error string (``invalid_grant``, ...) and
    ``description`` the optional ``error_description``.
    """

    default_code = "oauth_error"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        description: str | None = None,
        **extra: Any,
    ) -> None:
        self.description = description
        super().__init__(message, code=code, status_code=status_code, **extra)


class InvalidClientError(OAuthApiError):
    default_code = "invalid_client"


class InvalidGrantError(OAuthApiError):
    """The authorization code is unknown, expired, or already used."""

    default_code = "invalid_grant"


class OAuthInvalidRequestError(OAuthApiError):
    default_code = "invalid_request"


class InvalidScopeError(OAuthApiError):
    default_code = "invalid_scope"


class UnsupportedGrantTypeError(OAuthApiError):
    default_code = "unsupported_grant_type"


class UnsupportedResponseTypeError(OAuthApiError):
    default_code = "unsupported_response_type"


_OAUTH_ERRORS: dict[str, type[OAuthApiError]] = {
    cls.default_code: cls
    for cls in (
        InvalidClientError,
        InvalidGrantError,
        OAuthInvalidRequestError,
        InvalidScopeError,
        UnsupportedGrantTypeError,
        UnsupportedResponseTypeError,
    )
}


def oauth_error_from_response(status_code: int, body: dict[str, Any]) -> OAuthApiError:
    """Build the OAuth error matching the response's ``error`` field.

    Unknown error codes map to the generic OAuthApiError.
    """
    code = str(body.get("error") or OAuthApiError.default_code)
    description = body.get("error_description")
    message = description or f"OAuth request failed: {code}"
    error_cls = _OAUTH_ERRORS.get(code, OAuthApiError)
    return error_cls(message, code=code, status_code=status_code, description=description)
