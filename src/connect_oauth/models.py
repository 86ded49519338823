"""Result records returned by the OAuth endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenResponse:
    """Credentials for a connected account, from ``/oauth/token``."""

    access_token: str | None = None
    token_type: str | None = None
    scope: str | None = None
    livemode: bool | None = None
    refresh_token: str | None = None
    account_id: str | None = None
    publishable_key: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenResponse:
        return cls(
            access_token=data.get("access_token"),
            token_type=data.get("token_type"),
            scope=data.get("scope"),
            livemode=data.get("livemode"),
            refresh_token=data.get("refresh_token"),
            account_id=data.get("account_id"),
            publishable_key=data.get("publishable_key"),
            raw=dict(data),
        )


@dataclass(frozen=True, slots=True)
class DeauthorizedAccount:
    """The account disconnected by ``/oauth/deauthorize``."""

    account_id: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeauthorizedAccount:
        return cls(account_id=data.get("account_id"), raw=dict(data))
