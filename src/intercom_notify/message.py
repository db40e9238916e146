"""Intercom message builder and its resolved send variants.

A notification builds an ``IntercomMessage`` fluently::

    IntercomMessage.create("Your export is ready").from_admin("42").to_user_id("u-1")

Before dispatch the message is resolved once into either a ``DirectMessage``
(admin-initiated message, ``POST /messages``) or a ``ConversationReply``
(``POST /conversations/{id}/reply``).
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from intercom_notify.defaults import (
    FALLBACK_REQUIRED_FIELDS,
    KIND_CONVERSATION_REPLY,
    REQUIRED_FIELDS,
    TEMPLATE_PERSONAL,
    TEMPLATE_PLAIN,
    TYPE_EMAIL,
    TYPE_INAPP,
)
from intercom_notify.exceptions import MessageIncomplete

REASON_NO_RECIPIENT = "Recipient is not provided"
REASON_BAD_ROUTE = "Recipient route must be an Intercom user id or a recipient mapping"
REASON_INVALID = "The message is not valid. Please check that you have filled required params"


# ---------------------------------------------------------------------------
# Resolved variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectMessage:
    """Admin-initiated message with its full field set."""

    fields: dict[str, Any]


@dataclass(frozen=True)
class ConversationReply:
    """Admin reply appended to an existing conversation."""

    conversation_id: str
    body: dict[str, Any]


ResolvedMessage = Union[DirectMessage, ConversationReply]


# ---------------------------------------------------------------------------
# Validation policy
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationPolicy:
    """Required non-empty payload fields per message kind.

    Kinds are the Intercom ``message_type`` values (``inapp``, ``email``) plus
    ``conversation_reply``. Kinds without an entry require ``fallback``.
    """

    required: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(REQUIRED_FIELDS),
    )
    fallback: tuple[str, ...] = FALLBACK_REQUIRED_FIELDS

    def __post_init__(self) -> None:
        frozen = {kind: tuple(fields) for kind, fields in self.required.items()}
        object.__setattr__(self, "required", MappingProxyType(frozen))
        object.__setattr__(self, "fallback", tuple(self.fallback))

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.required.items())), self.fallback))

    def fields_for(self, kind: str) -> tuple[str, ...]:
        return tuple(self.required.get(kind, self.fallback))

    def with_required(self, kind: str, fields: tuple[str, ...] | list[str]) -> ValidationPolicy:
        """Return a copy of the policy with *kind* requiring *fields*."""
        required = dict(self.required)
        required[kind] = tuple(fields)
        return ValidationPolicy(required=required, fallback=self.fallback)

    def missing_fields(self, message: IntercomMessage) -> tuple[str, ...]:
        missing = [f for f in self.fields_for(message.kind) if _is_empty(message.payload.get(f))]
        # A direct message always needs somebody to deliver to
        if not message.conversation_id and not message.has_recipient() and "to" not in missing:
            missing.append("to")
        return tuple(missing)


DEFAULT_POLICY = ValidationPolicy()


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    return False


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class IntercomMessage:
    """Fluent builder for an Intercom message payload."""

    def __init__(self, body: str | None = None) -> None:
        self.payload: dict[str, Any] = {}
        self.conversation_id: str | None = None
        if body is not None:
            self.body(body)
        self.inapp()

    @classmethod
    def create(cls, body: str | None = None) -> IntercomMessage:
        return cls(body)

    # --- content ---

    def body(self, value: str) -> IntercomMessage:
        self.payload["body"] = value
        return self

    def subject(self, value: str) -> IntercomMessage:
        self.payload["subject"] = value
        return self

    def email(self) -> IntercomMessage:
        self.payload["message_type"] = TYPE_EMAIL
        return self

    def inapp(self) -> IntercomMessage:
        self.payload["message_type"] = TYPE_INAPP
        return self

    def plain(self) -> IntercomMessage:
        self.payload["template"] = TEMPLATE_PLAIN
        return self

    def personal(self) -> IntercomMessage:
        self.payload["template"] = TEMPLATE_PERSONAL
        return self

    # --- sender / recipient ---

    def from_admin(self, admin_id: str | int) -> IntercomMessage:
        self.payload["from"] = {"type": "admin", "id": str(admin_id)}
        return self

    def to(self, recipient: Mapping[str, Any]) -> IntercomMessage:
        self.payload["to"] = dict(recipient)
        return self

    def to_user_id(self, user_id: str) -> IntercomMessage:
        return self.to({"type": "user", "id": user_id})

    def to_user_email(self, email: str) -> IntercomMessage:
        return self.to({"type": "user", "email": email})

    def to_contact_id(self, contact_id: str) -> IntercomMessage:
        return self.to({"type": "contact", "id": contact_id})

    def to_lead_id(self, lead_id: str) -> IntercomMessage:
        return self.to({"type": "lead", "id": lead_id})

    def reply_to_conversation(self, conversation_id: str) -> IntercomMessage:
        self.conversation_id = conversation_id
        return self

    # --- inspection ---

    @property
    def kind(self) -> str:
        if self.conversation_id:
            return KIND_CONVERSATION_REPLY
        return str(self.payload.get("message_type") or TYPE_INAPP)

    def has_recipient(self) -> bool:
        return not _is_empty(self.payload.get("to"))

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.payload)

    def conversation_body(self) -> dict[str, Any]:
        """Body for ``POST /conversations/{id}/reply`` as an admin comment."""
        body: dict[str, Any] = {
            "message_type": "comment",
            "type": "admin",
            "body": self.payload.get("body"),
        }
        sender = self.payload.get("from")
        if isinstance(sender, Mapping) and sender.get("id"):
            body["admin_id"] = sender["id"]
        return body

    def is_valid(self, policy: ValidationPolicy | None = None) -> bool:
        return not (policy or DEFAULT_POLICY).missing_fields(self)

    def resolve(self, policy: ValidationPolicy | None = None) -> ResolvedMessage:
        """Validate and resolve into the variant the API call needs.

        Raises ``MessageIncomplete`` listing the missing fields.
        """
        missing = (policy or DEFAULT_POLICY).missing_fields(self)
        if missing:
            raise MessageIncomplete(self, REASON_INVALID, missing)
        if self.conversation_id:
            return ConversationReply(
                conversation_id=self.conversation_id,
                body=self.conversation_body(),
            )
        return DirectMessage(fields=self.to_dict())

    def __repr__(self) -> str:
        target = f"conversation={self.conversation_id!r}" if self.conversation_id else f"to={self.payload.get('to')!r}"
        return f"IntercomMessage(kind={self.kind!r}, {target})"
