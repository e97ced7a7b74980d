"""
User model definition.

This module defines the User model for journal authors.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, generate_uuid


class User(Base, TimestampMixin):
    """
    Journal author.

    Attributes:
        id: Unique user identifier (UUID).
        username: Public handle used in journal URLs (unique, indexed).
        first: First name.
        last: Last name.
    """

    __tablename__ = "users"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)

    # Profile
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    first: Mapped[str] = mapped_column(String(100), nullable=False)
    last: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    entries = relationship("Entry", back_populates="user", cascade="all, delete-orphan")

    @property
    def display_name(self) -> str:
        """Full name shown on journal pages."""
        return f"{self.first} {self.last}"
