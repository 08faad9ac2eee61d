"""Sendinblue API backends module."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


@dataclass(frozen=True)
class ContactRecord:
    """Contact submitted by a visitor, to be synchronized with Sendinblue."""

    email: str
    name: str | None = None
    custom_fields: dict[str, Any] = field(default_factory=dict)


class FieldType(StrEnum):
    """Types of the custom fields (attributes) defined on the Sendinblue account."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


@dataclass
class MailingList:
    """Contact list as returned by the Sendinblue API."""

    id: str
    name: str
    enabled: bool = False
    folder_id: int | None = None
    unique_subscribers: int | None = None
    total_blacklisted: int | None = None
    total_subscribers: int | None = None


@dataclass
class CustomFieldDefinition:
    """Custom contact attribute defined on the Sendinblue account."""

    id: str
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    choices: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Result:
    """
    Outcome of an operation against the Sendinblue API.

    Either a success carrying an optional `value`, or a failure carrying a single
    `error` message. `notices` are messages meant to be shown to the visitor as is.
    """

    ok: bool
    value: Any = None
    error: str | None = None
    notices: tuple[str, ...] = ()

    @classmethod
    def success(cls, value=None):
        """Build a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message, notices=()):
        """Build a failed result."""
        return cls(ok=False, error=message, notices=tuple(notices))


SyncResult = Result
