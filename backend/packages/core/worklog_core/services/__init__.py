"""
Service layer.

Business logic services for the application.
"""

from .entry_service import EntryService
from .timeline_service import TimelineService
from .user_service import UserService

__all__ = [
    "UserService",
    "EntryService",
    "TimelineService",
]
