"""
FastAPI integration for the event consumer.
Adapts Starlette requests and responses to the consumer's request protocol.
"""

import json
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from loguru import logger

from .config.settings import EventSettings
from .consumer import EventConsumer, create_consumer
from .models import HealthStatus


class EventRequestAdapter:
    """Exposes ``header(name)`` and ``body`` over a Starlette request."""

    def __init__(self, request: Request, body: Any):
        self._request = request
        self.body = body

    def header(self, name: str) -> str | None:
        return self._request.headers.get(name)


class EventResponseRecorder:
    """Records what the consumer writes and renders it as a Starlette response."""

    def __init__(self):
        self.status_code: int | None = None
        self.content: Any = None
        self.has_content = False

    def status(self, code: int) -> "EventResponseRecorder":
        self.status_code = code
        return self

    def json(self, body: Any) -> None:
        self.content = body
        self.has_content = True

    def send_status(self, code: int) -> None:
        self.status_code = code

    def to_response(self) -> Response:
        if self.status_code is None:
            raise RuntimeError("Consumer finished without writing a response")
        if self.has_content:
            try:
                return JSONResponse(
                    status_code=self.status_code, content=jsonable_encoder(self.content)
                )
            except (TypeError, ValueError) as e:
                logger.warning(f"Response body is not JSON-encodable, sending it as text: {e}")
                return JSONResponse(
                    status_code=self.status_code, content=_stringify(self.content)
                )
        return Response(status_code=self.status_code)


def _stringify(content: Any) -> Any:
    if isinstance(content, dict):
        return {str(key): str(value) for key, value in content.items()}
    return str(content)


async def _read_body(request: Request) -> Any:
    """Parse the JSON body; an empty or undecodable body counts as absent."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Discarding undecodable event body: {e}")
        return None


def create_event_router(consumer: EventConsumer, path: str = "/events") -> APIRouter:
    """
    Create a router that feeds POST requests on ``path`` through ``consumer``.

    Args:
        consumer: Consumer with its handlers registered
        path: Route path for inbound events

    Returns:
        Configured FastAPI router
    """
    router = APIRouter(tags=["events"])

    @router.post(path)
    async def receive_event(request: Request) -> Response:
        body = await _read_body(request)
        recorder = EventResponseRecorder()
        await consumer(EventRequestAdapter(request, body), recorder)
        return recorder.to_response()

    return router


def create_standalone_app(
    settings: EventSettings,
    consumer: EventConsumer | None = None,
    path: str = "/events",
) -> FastAPI:
    """
    Create standalone FastAPI app serving the event route and a health check.

    Args:
        settings: Shared settings
        consumer: Consumer to mount; a fresh one is created when omitted
        path: Route path for inbound events

    Returns:
        Configured FastAPI application
    """
    consumer = consumer or create_consumer(settings)

    app = FastAPI(
        title="Webhook Events",
        description="Authenticated webhook event dispatch",
    )
    app.include_router(create_event_router(consumer, path=path))

    @app.get("/health")
    async def health() -> HealthStatus:
        return HealthStatus(status="healthy", registered_event_types=consumer.event_types)

    logger.info(f"Event route mounted at {path}")
    return app
