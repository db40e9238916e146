"""Environment-driven settings and the channel factory.

Env vars: INTERCOM_ACCESS_TOKEN, INTERCOM_API_URL, INTERCOM_API_VERSION,
INTERCOM_TIMEOUT.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from intercom_notify.channel import IntercomChannel
from intercom_notify.client import IntercomClient
from intercom_notify.defaults import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT_SECONDS,
)
from intercom_notify.message import ValidationPolicy

log = logging.getLogger("intercom_notify.config")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class IntercomSettings:
    access_token: str
    api_url: str = DEFAULT_API_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> IntercomSettings:
        token = os.environ.get("INTERCOM_ACCESS_TOKEN", "")
        if not token:
            raise RuntimeError("INTERCOM_ACCESS_TOKEN not set.")
        return cls(
            access_token=token,
            api_url=os.environ.get("INTERCOM_API_URL", DEFAULT_API_URL),
            api_version=os.environ.get("INTERCOM_API_VERSION", DEFAULT_API_VERSION),
            timeout=_env_float("INTERCOM_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        )


def create_client(settings: IntercomSettings | None = None) -> IntercomClient:
    s = settings or IntercomSettings.from_env()
    return IntercomClient(
        s.access_token,
        base_url=s.api_url,
        api_version=s.api_version,
        timeout=s.timeout,
    )


def create_channel(
    settings: IntercomSettings | None = None,
    policy: ValidationPolicy | None = None,
) -> IntercomChannel:
    """Build a channel backed by a fresh ``IntercomClient``."""
    return IntercomChannel(create_client(settings), policy=policy)
