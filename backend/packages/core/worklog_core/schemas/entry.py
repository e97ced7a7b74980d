"""
Entry schemas.

Request and response models for entry-related operations. Create, update
and pending-submission payloads share the same field validation so that an
optimistic preview is decoded exactly like the request that produces it.
"""

import datetime as dt
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from worklog_database.models import EntryPrivacy, EntryType

TEXT_MAX_LENGTH = 255
ENTRY_ID_MAX_LENGTH = 36

# Alternate visibility labels accepted on input.
PRIVACY_ALIASES = {
    "public": EntryPrivacy.EVERYONE.value,
    "private": EntryPrivacy.OWNER.value,
}

EntryText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TEXT_MAX_LENGTH)
]

_url_adapter = TypeAdapter(HttpUrl)


def parse_entry_date(value: Any) -> Any:
    """
    Reduce a submitted date to its calendar date.

    Accepts ``YYYY-MM-DD`` strings, full ISO-8601 timestamps and
    date/datetime objects. Anything else is returned unchanged for pydantic
    to reject.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise ValueError("Date is required")
        try:
            return dt.date.fromisoformat(raw)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(raw).date()
        except ValueError:
            raise ValueError(f"Invalid date: {raw!r}") from None
    return value


def normalize_privacy(value: Any) -> Any:
    """Map alternate privacy labels onto the canonical ones."""
    if isinstance(value, str):
        label = value.strip().lower()
        return PRIVACY_ALIASES.get(label, label)
    return value


def normalize_link(value: Any) -> str | None:
    """Treat blank links as absent and validate the rest as http(s) URLs."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Link must be a string")
    link = value.strip()
    if not link:
        return None
    try:
        _url_adapter.validate_python(link)
    except ValidationError:
        raise ValueError("Link is invalid") from None
    return link


class EntryFields(BaseModel):
    """Validated entry content."""

    date: dt.date
    type: EntryType
    privacy: EntryPrivacy = EntryPrivacy.EVERYONE
    text: EntryText
    link: str | None = None

    parse_date = field_validator("date", mode="before")(parse_entry_date)
    check_privacy = field_validator("privacy", mode="before")(normalize_privacy)
    check_link = field_validator("link", mode="before")(normalize_link)


class EntryCreate(EntryFields):
    """Entry creation request. ``id`` is normally generated by the client."""

    id: str | None = Field(None, min_length=1, max_length=ENTRY_ID_MAX_LENGTH)


class EntryUpdate(BaseModel):
    """Partial entry update request."""

    date: dt.date | None = None
    type: EntryType | None = None
    privacy: EntryPrivacy | None = None
    text: EntryText | None = None
    link: str | None = None

    parse_date = field_validator("date", mode="before")(parse_entry_date)
    check_privacy = field_validator("privacy", mode="before")(normalize_privacy)
    check_link = field_validator("link", mode="before")(normalize_link)


class EntryResponse(BaseModel):
    """Entry response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: dt.date
    type: EntryType
    privacy: EntryPrivacy
    text: str
    link: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class PendingEntry(EntryFields):
    """
    An entry whose creation request is still in flight.

    Decoded from the submitted form fields rather than from a server
    response; unrelated fields such as ``intent`` are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1, max_length=ENTRY_ID_MAX_LENGTH)
