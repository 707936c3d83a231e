"""
Event publisher with async HTTP delivery.
Uses httpx for async HTTP operations.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from loguru import logger
from pydantic_core import PydanticSerializationError

from .config.settings import EventSettings
from .core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    create_missing_event_type_error,
    create_publish_error,
)
from .models import EventEnvelope

PublishFunction = Callable[[str, Any], Awaitable[None]]


class EventPublisher:
    """
    Sends event envelopes to the configured endpoint.

    Each publish opens a short-lived client unless the publisher is used as
    an async context manager, in which case one client serves every call.
    """

    def __init__(
        self,
        settings: EventSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize event publisher.

        Args:
            settings: Shared settings holding endpoint and secret
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if not settings.event_endpoint_url:
            logger.warning("Event publisher created without an endpoint URL")

    def _build_client(self) -> httpx.AsyncClient:
        headers = {
            self.settings.auth_header: self.settings.event_auth_token,
            "Accept": "application/json",
            "User-Agent": "webhook-events",
        }
        return httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(self.settings.publish_timeout),
            transport=self._transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        if not self._client:
            self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def publish(self, event_type: str, data: Any = None) -> None:
        """
        Publish one event.

        Args:
            event_type: Type the receiving consumer dispatches on
            data: JSON-serializable payload

        Raises:
            InvalidArgumentError: empty event type or payload that cannot be
                serialized to JSON
            ConfigurationError: no endpoint configured
            PublishError: transport failure or non-2xx response
        """
        if not event_type:
            raise create_missing_event_type_error()

        url = self.settings.event_endpoint_url
        if not url:
            raise ConfigurationError(
                message="event_endpoint_url is required to publish events",
                error_code="MISSING_EVENT_ENDPOINT",
                details={"env_var": "EVENTS_EVENT_ENDPOINT_URL"},
            )

        envelope = EventEnvelope(type=event_type, data=data)
        try:
            payload = envelope.model_dump(mode="json")
        except PydanticSerializationError as e:
            raise InvalidArgumentError(
                message=f"Event data is not JSON-serializable: {e}",
                error_code="UNSERIALIZABLE_EVENT_DATA",
                details={"event_type": event_type},
            ) from e

        if self._client:
            await self._send(self._client, url, event_type, payload)
        else:
            async with self._build_client() as client:
                await self._send(client, url, event_type, payload)

    async def _send(
        self, client: httpx.AsyncClient, url: str, event_type: str, payload: dict
    ) -> None:
        logger.debug(f"Publishing event {event_type} to {url}")

        try:
            response = await client.post(url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Event {event_type} rejected with HTTP {e.response.status_code}"
            )
            raise create_publish_error(
                event_type,
                f"HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Event {event_type} could not be delivered: {e}")
            raise create_publish_error(event_type, str(e)) from e

        logger.info(f"Published event: {event_type}")


def create_publisher(
    settings: EventSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PublishFunction:
    """Create a ``publish(event_type, data)`` coroutine function."""
    return EventPublisher(settings, transport=transport).publish
