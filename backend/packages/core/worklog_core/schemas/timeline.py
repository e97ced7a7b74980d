"""
Timeline schemas.

Models produced by the timeline engine: entries grouped into calendar weeks
and, within each week, into fixed category sections.
"""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from worklog_database.models import EntryPrivacy, EntryType

from .user import UserResponse


class TimelineEntry(BaseModel):
    """
    An entry as displayed on a timeline.

    ``pending`` is True while the entry is only known from an in-flight
    creation request.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    date: dt.date
    type: EntryType
    privacy: EntryPrivacy
    text: str
    link: str | None = None
    pending: bool = False


class CategoryBucket(BaseModel):
    """Entries of one type within a week."""

    type: EntryType
    title: str
    entries: list[TimelineEntry] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_empty(self) -> bool:
        """Whether renderers should skip this section."""
        return not self.entries


class WeekGroup(BaseModel):
    """Entries sharing the same Sunday-aligned week."""

    week_start: str
    title: str
    sections: list[CategoryBucket]


class RejectedSubmission(BaseModel):
    """A pending submission that could not be decoded."""

    id: str | None = None
    errors: list[str]


class Timeline(BaseModel):
    """Grouped timeline ready for rendering."""

    weeks: list[WeekGroup] = Field(default_factory=list)
    pending_count: int = 0
    rejected: list[RejectedSubmission] = Field(default_factory=list)


class TimelineRequest(BaseModel):
    """Timeline request carrying the client's in-flight submissions."""

    pending: list[dict[str, Any]] = Field(default_factory=list)


class TimelineResponse(BaseModel):
    """Journal page view model."""

    owner: UserResponse
    owner_is_viewer: bool
    timeline: Timeline
