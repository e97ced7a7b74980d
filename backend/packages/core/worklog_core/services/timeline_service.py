"""
Timeline service.

Builds the journal page view model: the owner's visible entries merged with
the viewer's in-flight submissions and grouped by week and category.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from worklog_core import get_logger
from worklog_core.pending import collect_pending_entries
from worklog_core.schemas import TimelineEntry, TimelineResponse, UserResponse
from worklog_core.timeline import build_timeline

from .entry_service import EntryService
from .user_service import UserService

logger = get_logger(__name__)


class TimelineService:
    """Journal timeline service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize timeline service.

        Args:
            session: Database session.
        """
        self.session = session
        self.users = UserService(session)
        self.entries = EntryService(session)

    async def get_timeline(
        self,
        owner_username: str,
        viewer_id: str | None = None,
        submissions: Iterable[Mapping[str, Any]] = (),
    ) -> TimelineResponse:
        """
        Build the timeline of a journal for a viewer.

        In-flight submissions are only honoured for the owner's own journal;
        anyone else cannot add entries to it.

        Args:
            owner_username: Username of the journal owner.
            viewer_id: Signed-in user identifier, or None for anonymous viewers.
            submissions: Raw form fields of the viewer's in-flight requests.

        Returns:
            Timeline response.

        Raises:
            ValueError: If the owner does not exist.
        """
        owner = await self.users.get_by_username(owner_username)
        owner_is_viewer = viewer_id == owner.id

        persisted = [
            TimelineEntry.model_validate(entry.model_dump())
            for entry in await self.entries.list_visible_entries(owner, viewer_id)
        ]

        submissions = list(submissions)
        if submissions and not owner_is_viewer:
            logger.info(
                "Ignoring pending submissions from non-owner",
                extra={"owner_id": owner.id, "viewer_id": viewer_id},
            )
            submissions = []

        batch = collect_pending_entries(submissions)
        timeline = build_timeline(persisted, batch.entries)
        timeline.rejected = batch.rejected

        return TimelineResponse(
            owner=UserResponse.model_validate(owner),
            owner_is_viewer=owner_is_viewer,
            timeline=timeline,
        )
