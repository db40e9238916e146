"""On-demand notifiable: route a notification without a domain object."""

from __future__ import annotations

from typing import Any

from intercom_notify.ports import Route


class OnDemandNotifiable:
    """Holds explicit routes per channel.

    Usage::

        OnDemandNotifiable().route("intercom", {"type": "user", "email": "a@b.c"})
    """

    def __init__(self, routes: dict[str, Route] | None = None) -> None:
        self.routes: dict[str, Route] = dict(routes or {})

    def route(self, channel: str, address: Route) -> OnDemandNotifiable:
        self.routes[channel] = address
        return self

    def route_notification_for(self, channel: str) -> Route | None:
        return self.routes.get(channel)

    def __repr__(self) -> str:
        channels: list[Any] = sorted(self.routes)
        return f"OnDemandNotifiable(channels={channels!r})"
