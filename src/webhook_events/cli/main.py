#!/usr/bin/env python3
"""
CLI interface for webhook events.
"""

import asyncio
import json

import click
import uvicorn
from loguru import logger

from ..api import create_standalone_app
from ..config.settings import get_settings
from ..core.exceptions import ConfigurationError, InvalidArgumentError, PublishError
from ..core.logging import setup_logging
from ..publisher import create_publisher


def _load_settings():
    try:
        return get_settings()
    except ConfigurationError as e:
        raise click.ClickException(e.message)


@click.group()
def app():
    """Webhook events CLI."""
    pass


@app.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
def serve(host: str | None, port: int | None):
    """Serve the event route with no handlers registered."""
    settings = _load_settings()
    setup_logging(settings.log_level, enable_json=settings.log_json)
    settings.log_configuration()

    uvicorn.run(
        create_standalone_app(settings),
        host=settings.host if host is None else host,
        port=settings.port if port is None else port,
        log_level=settings.log_level.lower(),
    )


@app.command()
@click.argument("event_type")
@click.option("--data", "data_json", default="null", help="Event payload as JSON")
def publish(event_type: str, data_json: str):
    """Publish a single event to the configured endpoint."""
    settings = _load_settings()
    setup_logging(settings.log_level, enable_json=settings.log_json)

    try:
        data = json.loads(data_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--data")

    try:
        asyncio.run(create_publisher(settings)(event_type, data))
    except (ConfigurationError, InvalidArgumentError, PublishError) as e:
        logger.error(e.message)
        raise click.ClickException(e.message)

    click.echo(f"✅ Published {event_type}")


if __name__ == "__main__":
    app()
