from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from webhook_events.cli.main import app
from webhook_events.config.settings import EventSettings
from webhook_events.core.exceptions import create_publish_error


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("webhook_events.cli.main.setup_logging"):
        yield


class TestPublishCommand:
    """Test the publish command."""

    def test_publish_success(self, runner, settings: EventSettings) -> None:
        publish = AsyncMock(return_value=None)
        with patch("webhook_events.cli.main.get_settings", return_value=settings), patch(
            "webhook_events.cli.main.create_publisher", return_value=publish
        ):
            result = runner.invoke(app, ["publish", "some-event-type", "--data", '{"some": "data"}'])

        assert result.exit_code == 0
        assert "Published some-event-type" in result.output
        publish.assert_awaited_once_with("some-event-type", {"some": "data"})

    def test_publish_failure(self, runner, settings: EventSettings) -> None:
        publish = AsyncMock(side_effect=create_publish_error("some-event-type", "HTTP 401", 401))
        with patch("webhook_events.cli.main.get_settings", return_value=settings), patch(
            "webhook_events.cli.main.create_publisher", return_value=publish
        ):
            result = runner.invoke(app, ["publish", "some-event-type"])

        assert result.exit_code == 1
        assert "HTTP 401" in result.output

    def test_invalid_json(self, runner, settings: EventSettings) -> None:
        with patch("webhook_events.cli.main.get_settings", return_value=settings):
            result = runner.invoke(app, ["publish", "some-event-type", "--data", "{oops"])

        assert result.exit_code == 2
        assert "Invalid JSON" in result.output


class TestServeCommand:
    def test_serve_runs_uvicorn(self, runner, settings: EventSettings) -> None:
        with patch("webhook_events.cli.main.get_settings", return_value=settings), patch(
            "webhook_events.cli.main.uvicorn.run"
        ) as run:
            result = runner.invoke(app, ["serve", "--port", "9100"])

        assert result.exit_code == 0
        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 9100
        assert run.call_args.kwargs["host"] == "0.0.0.0"

    def test_serve_accepts_port_zero(self, runner, settings: EventSettings) -> None:
        with patch("webhook_events.cli.main.get_settings", return_value=settings), patch(
            "webhook_events.cli.main.uvicorn.run"
        ) as run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "0"])

        assert result.exit_code == 0
        assert run.call_args.kwargs["port"] == 0
        assert run.call_args.kwargs["host"] == "127.0.0.1"

    def test_serve_passes_json_logging_flag(self, runner) -> None:
        settings = EventSettings(event_auth_token="secret", log_json=True)
        with patch("webhook_events.cli.main.get_settings", return_value=settings), patch(
            "webhook_events.cli.main.uvicorn.run"
        ), patch("webhook_events.cli.main.setup_logging") as setup:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        setup.assert_called_once_with("INFO", enable_json=True)
