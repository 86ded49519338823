"""Vulture whitelist — false positives that are actually used by consumers."""

# ---------------------------------------------------------------------------
# Public API methods on OAuthClient (used by consumers, not internally)
# ---------------------------------------------------------------------------
from connect_oauth.client import OAuthClient

OAuthClient.authorize_url
OAuthClient.exchange_token
OAuthClient.deauthorize
OAuthClient.config
OAuthClient.executor

from connect_oauth.executor import RequestMethod

RequestMethod.GET
RequestMethod.DELETE

# ---------------------------------------------------------------------------
# Dataclass / response fields (used for serialization)
# ---------------------------------------------------------------------------
_.access_token
_.token_type
_.scope
_.livemode
_.refresh_token
_.account_id
_.publishable_key
_.raw
_.description
_.param
