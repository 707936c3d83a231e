"""
Custom exception classes for webhook event dispatch.
"""

from typing import Any, Dict, Optional


class BaseEventsException(Exception):
    """Base exception for all webhook event errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(BaseEventsException, ValueError):
    """Raised when a library call receives an unusable argument."""
    pass


class ConfigurationError(BaseEventsException):
    """Raised when configuration is invalid."""
    pass


class AuthenticationError(BaseEventsException):
    """Raised when the shared secret does not match."""
    pass


class PublishError(BaseEventsException):
    """Raised when an outbound event cannot be delivered."""
    pass


# Specific error factory functions
def create_missing_event_type_error() -> InvalidArgumentError:
    """Create the error raised when a handler has no event type."""
    return InvalidArgumentError(
        message="No event type defined for handler.",
        error_code="MISSING_EVENT_TYPE",
    )


def create_invalid_handler_error(event_type: str) -> InvalidArgumentError:
    """Create the error raised when a handler is not callable."""
    return InvalidArgumentError(
        message="Invalid event handler.",
        error_code="INVALID_EVENT_HANDLER",
        details={"event_type": event_type},
    )


def create_publish_error(
    event_type: str, reason: str, status_code: Optional[int] = None
) -> PublishError:
    """Create a publish error with delivery context."""
    details: Dict[str, Any] = {"event_type": event_type, "reason": reason}
    if status_code is not None:
        details["status_code"] = status_code

    return PublishError(
        message=f"Failed to publish event '{event_type}': {reason}",
        error_code="PUBLISH_FAILED",
        details=details,
    )
