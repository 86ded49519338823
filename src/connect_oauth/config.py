"""Connect OAuth configuration — client settings and per-request options."""

import enum
import urllib.parse
from dataclasses import dataclass

DEFAULT_API_BASE = "https://api.example.com"
DEFAULT_CONNECT_BASE = "https://connect.example.com"


class BaseAddress(enum.Enum):
    """Endpoint family a request is sent to."""

    API = "api"
    CONNECT = "connect"


def _normalize_base(name: str, value: str) -> str:
    parsed = urllib.parse.urlsplit(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"{name} must be an absolute http(s) URL, got {value!r}")
    return value.rstrip("/")


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Per-request overrides. Anything left as None falls back to OAuthConfig.

    Example:
        RequestOptions(client_id="ca_123")          # Override client_id only
        RequestOptions(api_key="sk_test_abc")       # Use another secret key
    """

    client_id: str | None = None
    api_key: str | None = None
    connect_base: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthConfig:
    """Client-wide settings. Build once at startup and pass to OAuthClient.

    Args:
        client_id: Fallback client identifier used when neither the request
            params nor the request options carry one.
        api_key: Secret key sent as a bearer token by the live executor.
        api_base: Root URL of the primary API.
        connect_base: Root URL of the OAuth (connect) endpoints.
        timeout: HTTP timeout in seconds for the live executor.
    """

    client_id: str | None = None
    api_key: str | None = None
    api_base: str = DEFAULT_API_BASE
    connect_base: str = DEFAULT_CONNECT_BASE
    timeout: float = 30.0

    def __post_init__(self) -> None:
        """Validate base URLs at construction time and drop trailing slashes."""
        object.__setattr__(self, "api_base", _normalize_base("api_base", self.api_base))
        object.__setattr__(
            self, "connect_base", _normalize_base("connect_base", self.connect_base),
        )

    def base_for(self, kind: BaseAddress, options: RequestOptions | None = None) -> str:
        """Root URL for an endpoint family. A per-request connect_base wins."""
        if kind is BaseAddress.CONNECT:
            if options is not None and options.connect_base:
                return _normalize_base("connect_base", options.connect_base)
            return self.connect_base
        return self.api_base

    def api_key_for(self, options: RequestOptions | None = None) -> str | None:
        """Secret key for a request — options override the config value."""
        if options is not None and options.api_key:
            return options.api_key
        return self.api_key
