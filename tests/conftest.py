"""Shared fixtures for intercom_notify tests."""

from unittest.mock import MagicMock

import httpx
import pytest

from intercom_notify.channel import IntercomChannel
from intercom_notify.message import IntercomMessage
from intercom_notify.ports import IntercomApiPort


class StubNotification:
    """Notification returning a pre-built message and recording who asked."""

    def __init__(self, message: IntercomMessage):
        self.message = message
        self.seen = []

    def to_intercom(self, notifiable):
        self.seen.append(notifiable)
        return self.message


class StubNotifiable:
    def __init__(self, route=None):
        self.route = route
        self.asked = []

    def route_notification_for(self, channel):
        self.asked.append(channel)
        return self.route


def make_status_error(status_code, text="Unprocessable Entity", path="/messages"):
    """Build the httpx error raised by ``Response.raise_for_status``."""
    request = httpx.Request("POST", f"https://api.intercom.io{path}")
    response = httpx.Response(
        status_code,
        request=request,
        json={"type": "error.list", "errors": [{"code": "parameter_invalid", "message": text}]},
    )
    return httpx.HTTPStatusError(
        f"Client error '{status_code} {text}' for url '{request.url}'",
        request=request,
        response=response,
    )


@pytest.fixture
def api_client():
    """Mock API port; both operations succeed by default."""
    client = MagicMock(spec=IntercomApiPort)
    client.create_message.return_value = {"type": "admin_message", "id": "1"}
    client.reply_to_conversation.return_value = {"type": "conversation", "id": "c"}
    return client


@pytest.fixture
def channel(api_client):
    return IntercomChannel(api_client)


@pytest.fixture
def direct_message():
    return IntercomMessage.create("Your export is ready").from_admin("42")
