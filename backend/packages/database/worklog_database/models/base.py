"""
Declarative base and shared model helpers.

All Worklog models inherit from ``Base``; models that track row lifecycle
also mix in ``TimestampMixin``.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Generate a random UUID4 string for primary keys."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base class for all models."""


class TimestampMixin:
    """
    Adds creation and update timestamps.

    Attributes:
        created_at: Row creation timestamp (set by the database).
        updated_at: Last modification timestamp (refreshed on update).
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
