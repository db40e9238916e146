"""Port interfaces for the Intercom channel.

The channel depends only on these protocols: what it is notifying, what
builds the message, and what talks to the Intercom API.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from intercom_notify.message import IntercomMessage

# A bare string or int is an Intercom user id; a mapping is used as the ``to`` object
Route = Union[str, int, Mapping[str, Any]]


@runtime_checkable
class Notifiable(Protocol):
    """Entity being notified. Resolves its address for a channel."""

    def route_notification_for(self, channel: str) -> Route | None: ...


@runtime_checkable
class IntercomNotification(Protocol):
    """Notification able to render itself as an Intercom message."""

    def to_intercom(self, notifiable: Notifiable) -> IntercomMessage: ...


@runtime_checkable
class IntercomApiPort(Protocol):
    """The two Intercom API operations the channel needs."""

    def create_message(self, fields: Mapping[str, Any]) -> dict[str, Any]: ...

    def reply_to_conversation(
        self,
        conversation_id: str,
        body: Mapping[str, Any],
    ) -> dict[str, Any]: ...
