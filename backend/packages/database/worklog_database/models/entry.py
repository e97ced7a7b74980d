"""
Entry model definition.

This module defines the Entry model for storing journal entries.
"""

import datetime
from enum import Enum

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, generate_uuid


class EntryType(str, Enum):
    """Entry category enumeration."""

    WORK = "work"
    LEARNING = "learning"
    INTERESTING_THING = "interesting-thing"


class EntryPrivacy(str, Enum):
    """Entry visibility enumeration."""

    EVERYONE = "everyone"
    OWNER = "owner"


class Entry(Base, TimestampMixin):
    """
    Journal entry model.

    Entry ids are usually generated by the client at submission time so that
    an optimistic preview and the confirmed row share the same identity.

    Attributes:
        id: Unique entry identifier (client-generated UUID).
        user_id: Author of the entry (foreign key to users).
        date: Calendar date the entry refers to.
        type: Entry category.
        privacy: Who can view the entry.
        text: Entry note.
        link: Optional reference URL.
    """

    __tablename__ = "entries"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)

    # Foreign key
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Content
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[EntryType] = mapped_column(String(20), nullable=False)
    privacy: Mapped[EntryPrivacy] = mapped_column(
        String(20), default=EntryPrivacy.EVERYONE, nullable=False
    )
    text: Mapped[str] = mapped_column(String(255), nullable=False)
    link: Mapped[str | None] = mapped_column(String(2000))

    # Relationships
    user = relationship("User", back_populates="entries")
