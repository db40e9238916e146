"""Error taxonomy for the Intercom channel.

``MessageIncomplete`` is raised before any API call. ``RequestFailed`` wraps a
bad HTTP response from Intercom. Every other transport error from httpx
propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from intercom_notify.message import IntercomMessage


class IntercomError(Exception):
    """Base class for errors raised by the Intercom channel."""
    pass


class MessageIncomplete(IntercomError):
    """The message cannot be sent: no recipient or required fields missing."""

    def __init__(
        self,
        message: IntercomMessage,
        reason: str,
        missing: tuple[str, ...] = (),
    ) -> None:
        detail = reason
        if missing:
            detail = f"{reason} (missing: {', '.join(missing)})"
        super().__init__(detail)
        self.message = message
        self.reason = reason
        self.missing = missing


class RequestFailed(IntercomError):
    """Intercom answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, message: str, response: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.response = response
