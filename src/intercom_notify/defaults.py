"""Shared constants and configuration defaults for the Intercom channel."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Channel
# ---------------------------------------------------------------------------

CHANNEL_NAME = "intercom"

# ---------------------------------------------------------------------------
# Intercom REST API
# ---------------------------------------------------------------------------

DEFAULT_API_URL = "https://api.intercom.io"
DEFAULT_API_VERSION = "2.11"
DEFAULT_TIMEOUT_SECONDS = 10.0

# ---------------------------------------------------------------------------
# Message types and templates
# ---------------------------------------------------------------------------

TYPE_INAPP = "inapp"
TYPE_EMAIL = "email"
TEMPLATE_PLAIN = "plain"
TEMPLATE_PERSONAL = "personal"

# Kind used by the validation policy for replies to an existing conversation
KIND_CONVERSATION_REPLY = "conversation_reply"

# ---------------------------------------------------------------------------
# Validation (required non-empty fields by message kind)
# ---------------------------------------------------------------------------

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    TYPE_INAPP: ("body", "from", "to"),
    TYPE_EMAIL: ("body", "subject", "from", "to"),
    KIND_CONVERSATION_REPLY: ("body",),
}
FALLBACK_REQUIRED_FIELDS: tuple[str, ...] = ("body",)
