"""
Client bundling a publisher and a consumer built from the same settings.
"""

from dataclasses import dataclass

import httpx

from .config.settings import EventSettings
from .consumer import EventConsumer, create_consumer
from .publisher import PublishFunction, create_publisher


@dataclass(frozen=True)
class EventClient:
    publish: PublishFunction
    consumer: EventConsumer


def create_client(
    settings: EventSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> EventClient:
    """Create an independent publisher and consumer pair."""
    return EventClient(
        publish=create_publisher(settings, transport=transport),
        consumer=create_consumer(settings),
    )
