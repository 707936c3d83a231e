"""
Event consumer: authenticates inbound webhook requests and dispatches the
event envelope to the handler registered for its type.

Status mapping:
    401  missing or wrong shared secret
    500  no request body, or the handler failed ({"error": reason} body)
    204  no handler registered for the event type
    200  handler completed
"""

import hmac
import inspect
from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from .config.settings import EventSettings
from .core.exceptions import (
    AuthenticationError,
    create_invalid_handler_error,
    create_missing_event_type_error,
)
from .models import EventRequest, EventResponse

EventHandler = Callable[[Any], Any]


def failure_reason(error: BaseException) -> Any:
    """Return the value a handler failed with, unwrapped from its exception."""
    if len(error.args) == 1:
        return error.args[0]
    return str(error)


class EventConsumer:
    """
    Request handler bound to a private registry of event handlers.

    Register handlers with ``on`` during setup, then pass the consumer to the
    HTTP layer, which awaits ``consumer(request, response)`` per request.
    """

    def __init__(self, settings: EventSettings):
        self.settings = settings
        self._handlers: dict[str, EventHandler] = {}

    def on(self, event_type: str, handler: EventHandler | None = None) -> None:
        """
        Register ``handler`` for ``event_type``.

        A second registration for the same type replaces the first.

        Raises:
            InvalidArgumentError: empty event type or non-callable handler
        """
        if not event_type:
            raise create_missing_event_type_error()
        if handler is None or not callable(handler):
            raise create_invalid_handler_error(event_type)

        if event_type in self._handlers:
            logger.debug(f"Replacing handler for event type: {event_type}")
        self._handlers[event_type] = handler

    @property
    def event_types(self) -> list[str]:
        return sorted(self._handlers)

    def get_handler(self, event_type: str | None) -> EventHandler | None:
        if not isinstance(event_type, str):
            return None
        return self._handlers.get(event_type)

    def authenticate(self, request: EventRequest) -> None:
        """Raise AuthenticationError unless the request carries the shared secret."""
        supplied = request.header(self.settings.auth_header)
        if not isinstance(supplied, str) or not hmac.compare_digest(
            supplied.encode("utf-8"), self.settings.event_auth_token.encode("utf-8")
        ):
            raise AuthenticationError(
                message="Invalid or missing event auth header",
                error_code="EVENT_AUTH_FAILED",
                details={"header": self.settings.auth_header},
            )

    async def __call__(self, request: EventRequest, response: EventResponse) -> None:
        try:
            self.authenticate(request)
        except AuthenticationError as e:
            logger.warning(f"Rejected event request: {e.message}")
            response.status(401)
            return

        body = request.body
        if body is None:
            logger.error("Rejected event request: no body")
            response.status(500)
            return

        event_type = body.get("type") if isinstance(body, Mapping) else None
        handler = self.get_handler(event_type)
        if handler is None:
            logger.info(f"No handler registered for event type: {event_type}")
            response.send_status(204)
            return

        try:
            result = handler(body.get("data"))
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.exception(f"Handler for event type {event_type} failed: {e}")
            response.status(500).json({"error": failure_reason(e)})
            return

        logger.info(f"Handled event: {event_type}")
        response.send_status(200)


def create_consumer(settings: EventSettings) -> EventConsumer:
    """Create a consumer with an empty handler registry."""
    return EventConsumer(settings)
