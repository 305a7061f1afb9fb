"""Tests for the ntfy publish client."""

import httpx
import pytest
import respx

from rainalert.config.schema import DEFAULT_NTFY_SERVER
from rainalert.models.notification import NotificationMessage, Priority
from rainalert.notify.ntfy_client import NtfyClient, SendError

MESSAGE = NotificationMessage(title="Rain Alert", priority=Priority.HIGH, body="Bring an umbrella")


@pytest.fixture
def ntfy():
    with httpx.Client() as http:
        yield NtfyClient(http, server="https://ntfy.example.com/")


class TestPublish:
    @respx.mock
    def test_success(self, ntfy: NtfyClient):
        route = respx.post("https://ntfy.example.com/rain-topic").mock(
            return_value=httpx.Response(200, json={"id": "abc"})
        )
        ntfy.publish("rain-topic", MESSAGE)

        assert route.called
        request = route.calls.last.request
        assert request.headers["title"] == "Rain Alert"
        assert request.headers["priority"] == "4"
        assert request.content == b"Bring an umbrella"

    @respx.mock
    def test_http_error(self, ntfy: NtfyClient):
        respx.post("https://ntfy.example.com/rain-topic").mock(
            return_value=httpx.Response(429, text="rate limited")
        )
        with pytest.raises(SendError, match="429") as exc_info:
            ntfy.publish("rain-topic", MESSAGE)
        assert exc_info.value.status_code == 429

    @respx.mock
    def test_transport_error_not_retried(self, ntfy: NtfyClient):
        route = respx.post("https://ntfy.example.com/rain-topic").mock(
            side_effect=httpx.ConnectError("unreachable")
        )
        with pytest.raises(SendError, match="failed to publish"):
            ntfy.publish("rain-topic", MESSAGE)
        assert route.call_count == 1

    @respx.mock
    def test_default_server(self):
        route = respx.post(f"{DEFAULT_NTFY_SERVER}/rain-topic").mock(
            return_value=httpx.Response(200)
        )
        with httpx.Client() as http:
            NtfyClient(http).publish("rain-topic", MESSAGE)
        assert route.called
