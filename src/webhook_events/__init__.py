"""
Webhook event dispatch: an authenticating consumer and a matching publisher.
"""

from .client import EventClient, create_client
from .config.settings import EventSettings
from .consumer import EventConsumer, create_consumer
from .core.exceptions import (
    AuthenticationError,
    BaseEventsException,
    ConfigurationError,
    InvalidArgumentError,
    PublishError,
)
from .models import EventEnvelope
from .publisher import EventPublisher, create_publisher

__all__ = [
    "AuthenticationError",
    "BaseEventsException",
    "ConfigurationError",
    "EventClient",
    "EventConsumer",
    "EventEnvelope",
    "EventPublisher",
    "EventSettings",
    "InvalidArgumentError",
    "PublishError",
    "create_client",
    "create_consumer",
    "create_publisher",
]
