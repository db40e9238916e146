"""Intercom notification channel.

Turns a notification into exactly one Intercom API call: an admin-initiated
message, or a reply to an existing conversation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from intercom_notify.defaults import CHANNEL_NAME
from intercom_notify.exceptions import MessageIncomplete, RequestFailed
from intercom_notify.message import (
    REASON_BAD_ROUTE,
    REASON_NO_RECIPIENT,
    ConversationReply,
    IntercomMessage,
    ValidationPolicy,
)
from intercom_notify.ports import IntercomApiPort, IntercomNotification, Notifiable, Route

log = logging.getLogger("intercom_notify.channel")


class IntercomChannel:
    """Send notifications via the Intercom API.

    Holds no per-call state; one instance can serve concurrent sends.
    """

    CHANNEL = CHANNEL_NAME

    def __init__(
        self,
        client: IntercomApiPort,
        policy: ValidationPolicy | None = None,
    ) -> None:
        self._client = client
        self._policy = policy or ValidationPolicy()

    @property
    def client(self) -> IntercomApiPort:
        return self._client

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def send(self, notifiable: Notifiable, notification: IntercomNotification) -> None:
        """Send *notification* to *notifiable*.

        Raises ``MessageIncomplete`` when the message has no recipient or lacks
        required fields, and ``RequestFailed`` when Intercom answers with a bad
        HTTP status. Other httpx errors propagate unchanged.
        """
        try:
            self._send(notifiable, notification)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            log.warning(
                "Intercom rejected request: HTTP %d", status,
                extra={"channel": self.CHANNEL, "status_code": status},
            )
            raise RequestFailed(status, str(exc), response=exc.response) from exc

    def _send(self, notifiable: Notifiable, notification: IntercomNotification) -> None:
        message = notification.to_intercom(notifiable)

        if not message.has_recipient() and not message.conversation_id:
            route = notifiable.route_notification_for(self.CHANNEL)
            if not route:
                raise MessageIncomplete(message, REASON_NO_RECIPIENT)
            _apply_route(message, route)

        resolved = message.resolve(self._policy)

        if isinstance(resolved, ConversationReply):
            log.debug(
                "Replying to conversation %s", resolved.conversation_id,
                extra={"channel": self.CHANNEL, "conversation_id": resolved.conversation_id},
            )
            self._client.reply_to_conversation(resolved.conversation_id, resolved.body)
        else:
            log.debug(
                "Creating %s message", message.kind,
                extra={"channel": self.CHANNEL, "message_kind": message.kind},
            )
            self._client.create_message(resolved.fields)


def _apply_route(message: IntercomMessage, route: Route) -> None:
    if isinstance(route, bool):
        raise MessageIncomplete(message, REASON_BAD_ROUTE)
    if isinstance(route, (str, int)):
        message.to_user_id(str(route))
    elif isinstance(route, Mapping):
        message.to(route)
    else:
        raise MessageIncomplete(message, REASON_BAD_ROUTE)
