"""Test fixtures for connect-oauth tests.

All tests are network-free — OAuthClient gets a RecordingExecutor, and the
live executor is driven through httpx MockTransport.
"""

from typing import Any

import pytest

from connect_oauth.config import OAuthConfig
from connect_oauth.executor import ApiRequest


class RecordingExecutor:
    """RequestExecutor double: records requests and returns canned payloads."""

    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None):
        self.response = response or {}
        self.error = error
        self.calls: list[tuple[ApiRequest, type]] = []

    def execute(self, request: ApiRequest, result_type: type):
        self.calls.append((request, result_type))
        if self.error is not None:
            raise self.error
        return result_type.from_dict(self.response)


@pytest.fixture
def config():
    return OAuthConfig(client_id="ca_123", api_key="sk_test_123")


@pytest.fixture
def bare_config():
    """Config with no fallback client_id."""
    return OAuthConfig()


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def make_executor():
    """Factory for executors with a canned response or error."""
    return RecordingExecutor
