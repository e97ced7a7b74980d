"""
Timeline engine.

Merges persisted entries with in-flight pending entries and groups the
result into Sunday-aligned weeks, each split into fixed category sections.

The engine is a pure function of its inputs: it keeps no state between
calls and never mutates the entries it is given.
"""

import calendar
import datetime as dt
from collections.abc import Iterable

from worklog_database.models import EntryType

from .schemas import CategoryBucket, PendingEntry, Timeline, TimelineEntry, WeekGroup

# First day of a timeline week, in ``datetime.date.weekday()`` numbering.
WEEK_STARTS_ON = calendar.SUNDAY

# Section display order and titles.
SECTIONS: tuple[tuple[EntryType, str], ...] = (
    (EntryType.WORK, "🏗 Work"),
    (EntryType.LEARNING, "💫 Learnings"),
    (EntryType.INTERESTING_THING, "😮 Interesting Things"),
)


def week_start(day: dt.date) -> dt.date:
    """Return the most recent week start on or before ``day``."""
    return day - dt.timedelta(days=(day.weekday() - WEEK_STARTS_ON) % 7)


def week_title(start: dt.date) -> str:
    """Human readable week heading, e.g. ``Week of January 7, 2024``."""
    return f"Week of {start:%B} {start.day}, {start.year}"


def merge_entries(
    persisted: Iterable[TimelineEntry], pending: Iterable[PendingEntry]
) -> list[TimelineEntry]:
    """
    Merge persisted and pending entries into one list with unique ids.

    A pending entry whose id is already persisted has been confirmed by the
    server: every field the persisted record defines overrides the pending
    value. Pending entries without a persisted counterpart are kept as-is
    and flagged as pending; a repeated pending id replaces the earlier one.

    Args:
        persisted: Confirmed entries visible to the viewer.
        pending: Decoded in-flight creation submissions.

    Returns:
        Merged entries in insertion order (persisted first).
    """
    confirmed_by_id: dict[str, TimelineEntry] = {entry.id: entry for entry in persisted}
    by_id = dict(confirmed_by_id)

    for entry in pending:
        confirmed = confirmed_by_id.get(entry.id)
        if confirmed is None:
            by_id[entry.id] = TimelineEntry(**entry.model_dump(), pending=True)
            continue
        fields = {**entry.model_dump(), **confirmed.model_dump(exclude_unset=True)}
        fields["pending"] = False
        by_id[entry.id] = TimelineEntry(**fields)

    return list(by_id.values())


def sort_entries(entries: Iterable[TimelineEntry]) -> list[TimelineEntry]:
    """Sort most recent first; same-date entries are ordered by id."""
    by_id = sorted(entries, key=lambda entry: entry.id)
    return sorted(by_id, key=lambda entry: entry.date, reverse=True)


def group_by_week(entries: Iterable[TimelineEntry]) -> list[WeekGroup]:
    """
    Group already sorted entries by week, then by category.

    Weeks appear in first-seen order. Each week always carries every section
    in ``SECTIONS`` order, empty ones included.
    """
    weeks: dict[dt.date, list[TimelineEntry]] = {}
    for entry in entries:
        weeks.setdefault(week_start(entry.date), []).append(entry)

    groups = []
    for start, week_entries in weeks.items():
        sections = [
            CategoryBucket(
                type=entry_type,
                title=title,
                entries=[entry for entry in week_entries if entry.type == entry_type],
            )
            for entry_type, title in SECTIONS
        ]
        groups.append(
            WeekGroup(week_start=start.isoformat(), title=week_title(start), sections=sections)
        )
    return groups


def build_timeline(
    persisted: Iterable[TimelineEntry], pending: Iterable[PendingEntry] = ()
) -> Timeline:
    """
    Build the grouped timeline for one render pass.

    Args:
        persisted: Confirmed entries, already filtered for the viewer.
        pending: Decoded in-flight creation submissions.

    Returns:
        Timeline with weeks most recent first.
    """
    entries = sort_entries(merge_entries(persisted, pending))
    return Timeline(
        weeks=group_by_week(entries),
        pending_count=sum(1 for entry in entries if entry.pending),
    )
