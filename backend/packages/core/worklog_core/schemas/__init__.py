"""
Pydantic schemas for API requests and responses.
"""

from .entry import (
    EntryCreate,
    EntryFields,
    EntryResponse,
    EntryUpdate,
    PendingEntry,
)
from .timeline import (
    CategoryBucket,
    RejectedSubmission,
    Timeline,
    TimelineEntry,
    TimelineRequest,
    TimelineResponse,
    WeekGroup,
)
from .user import UserCreate, UserListResponse, UserResponse

__all__ = [
    # User
    "UserCreate",
    "UserResponse",
    "UserListResponse",
    # Entry
    "EntryFields",
    "EntryCreate",
    "EntryUpdate",
    "EntryResponse",
    "PendingEntry",
    # Timeline
    "TimelineEntry",
    "CategoryBucket",
    "WeekGroup",
    "RejectedSubmission",
    "Timeline",
    "TimelineRequest",
    "TimelineResponse",
]
