"""Intercom REST API client (httpx).

Implements ``IntercomApiPort``. One request per call, no retries; non-2xx
responses raise ``httpx.HTTPStatusError`` for the channel to classify.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from intercom_notify.defaults import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT_SECONDS,
)

log = logging.getLogger("intercom_notify.client")


class IntercomClient:
    """Thin synchronous client for the two messaging endpoints."""

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("Intercom access token is required")
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
            "Intercom-Version": api_version,
        }
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def create_message(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return self._post("/messages", fields)

    def reply_to_conversation(
        self,
        conversation_id: str,
        body: Mapping[str, Any],
    ) -> dict[str, Any]:
        return self._post(f"/conversations/{quote(str(conversation_id), safe='')}/reply", body)

    def _post(self, path: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        resp = self._http.post(url, json=dict(payload), headers=self._headers)
        log.debug("POST %s -> %d", path, resp.status_code)
        resp.raise_for_status()
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError:
            # Accepted; the body is informational only
            log.debug("POST %s returned a non-JSON body", path)
            return {}
        return data if isinstance(data, dict) else {}

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> IntercomClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
