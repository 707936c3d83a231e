from typing import Any
from unittest.mock import Mock

import pytest

from webhook_events.config.settings import EventSettings


class FakeRequest:
    """Request exposing a fixed header value and body."""

    def __init__(self, header_value: str | None = "secret", body: Any = None):
        self.header = Mock(return_value=header_value)
        self.body = body


class FakeResponse:
    """Response whose ``status(code)`` returns a writer with a ``json`` mock."""

    def __init__(self):
        self.writer = Mock()
        self.status = Mock(return_value=self.writer)
        self.send_status = Mock()


@pytest.fixture
def settings() -> EventSettings:
    return EventSettings(
        event_auth_token="secret",
        event_endpoint_url="https://events.example.com/events",
    )


@pytest.fixture
def make_request():
    return FakeRequest


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def response() -> FakeResponse:
    return FakeResponse()
