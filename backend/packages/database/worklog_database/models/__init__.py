"""
Database models package.

This module exports all SQLAlchemy models for the Worklog application.
"""

from .base import Base, TimestampMixin
from .entry import Entry, EntryPrivacy, EntryType
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Entry",
    "EntryType",
    "EntryPrivacy",
]
