"""Intercom notification channel."""

from __future__ import annotations

from intercom_notify.channel import IntercomChannel
from intercom_notify.client import IntercomClient
from intercom_notify.config import IntercomSettings, create_channel, create_client
from intercom_notify.exceptions import IntercomError, MessageIncomplete, RequestFailed
from intercom_notify.message import (
    ConversationReply,
    DirectMessage,
    IntercomMessage,
    ValidationPolicy,
)
from intercom_notify.notifiable import OnDemandNotifiable
from intercom_notify.ports import IntercomApiPort, IntercomNotification, Notifiable

__all__ = [
    "ConversationReply",
    "DirectMessage",
    "IntercomApiPort",
    "IntercomChannel",
    "IntercomClient",
    "IntercomError",
    "IntercomMessage",
    "IntercomNotification",
    "IntercomSettings",
    "MessageIncomplete",
    "Notifiable",
    "OnDemandNotifiable",
    "RequestFailed",
    "ValidationPolicy",
    "create_channel",
    "create_client",
]
