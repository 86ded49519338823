"""Connect OAuth — authorize, exchange, and deauthorize connected accounts."""

__version__ = "0.1.0"

from connect_oauth.client import OAuthClient, resolve_client_id
from connect_oauth.config import BaseAddress, OAuthConfig, RequestOptions
from connect_oauth.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    ConnectOAuthError,
    InvalidClientError,
    InvalidGrantError,
    InvalidRequestError,
    InvalidScopeError,
    OAuthApiError,
    OAuthInvalidRequestError,
    UnsupportedGrantTypeError,
    UnsupportedResponseTypeError,
)
from connect_oauth.executor import ApiRequest, LiveRequestExecutor, RequestExecutor, RequestMethod
from connect_oauth.models import DeauthorizedAccount, TokenResponse

__all__ = [
    "APIConnectionError",
    "APIError",
    "ApiRequest",
    "AuthenticationError",
    "BaseAddress",
    "ConnectOAuthError",
    "DeauthorizedAccount",
    "InvalidClientError",
    "InvalidGrantError",
    "InvalidRequestError",
    "InvalidScopeError",
    "LiveRequestExecutor",
    "OAuthApiError",
    "OAuthClient",
    "OAuthConfig",
    "OAuthInvalidRequestError",
    "RequestExecutor",
    "RequestMethod",
    "RequestOptions",
    "TokenResponse",
    "UnsupportedGrantTypeError",
    "UnsupportedResponseTypeError",
    "resolve_client_id",
]
