"""
Entry service.

Handles reading, creating, updating and deleting journal entries.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from worklog_core import get_logger
from worklog_core.schemas import EntryCreate, EntryResponse, EntryUpdate
from worklog_database.models import Entry, EntryPrivacy, User

from .user_service import UserService

logger = get_logger(__name__)


class EntryService:
    """Journal entry service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize entry service.

        Args:
            session: Database session.
        """
        self.session = session

    async def fetch_entries(
        self, owner_username: str, viewer_id: str | None = None
    ) -> list[EntryResponse]:
        """
        Get the entries of a journal visible to a viewer.

        Args:
            owner_username: Username of the journal owner.
            viewer_id: Signed-in user identifier, or None for anonymous viewers.

        Returns:
            Entries, most recent first. Non-owners only see public entries.

        Raises:
            ValueError: If the owner does not exist.
        """
        owner = await UserService(self.session).get_by_username(owner_username)
        return await self.list_visible_entries(owner, viewer_id)

    async def list_visible_entries(
        self, owner: User, viewer_id: str | None = None
    ) -> list[EntryResponse]:
        """
        Get an owner's entries visible to a viewer.

        Args:
            owner: Journal owner.
            viewer_id: Signed-in user identifier, or None for anonymous viewers.

        Returns:
            Entries, most recent first.
        """
        stmt = select(Entry).where(Entry.user_id == owner.id)
        if viewer_id != owner.id:
            stmt = stmt.where(Entry.privacy == EntryPrivacy.EVERYONE)
        stmt = stmt.order_by(Entry.date.desc(), Entry.id)

        result = await self.session.execute(stmt)
        return [EntryResponse.model_validate(entry) for entry in result.scalars().all()]

    async def get_entry(self, entry_id: str, user_id: str) -> EntryResponse:
        """
        Get an entry owned by a user.

        Args:
            entry_id: Entry identifier.
            user_id: Owner identifier.

        Returns:
            Entry response.

        Raises:
            ValueError: If entry not found for this user.
        """
        entry = await self._get_owned_entry(entry_id, user_id)
        return EntryResponse.model_validate(entry)

    async def create_entry(self, user_id: str, data: EntryCreate) -> EntryResponse:
        """
        Create an entry.

        Args:
            user_id: Author identifier.
            data: Entry data, usually with a client-generated id.

        Returns:
            Created entry.

        Raises:
            ValueError: If an entry with the same id already exists.
        """
        if data.id is not None and await self.session.get(Entry, data.id) is not None:
            raise ValueError(f'Entry "{data.id}" already exists')

        entry = Entry(user_id=user_id, **data.model_dump(exclude_none=True))
        self.session.add(entry)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError(f'Entry "{data.id}" already exists') from None
        await self.session.refresh(entry)

        logger.info(
            "Created entry",
            extra={"entry_id": entry.id, "user_id": user_id, "entry_type": entry.type},
        )
        return EntryResponse.model_validate(entry)

    async def update_entry(
        self, entry_id: str, user_id: str, data: EntryUpdate
    ) -> EntryResponse:
        """
        Update an entry owned by a user.

        Only fields present in the request are changed; an explicit null
        ``link`` clears the link.

        Args:
            entry_id: Entry identifier.
            user_id: Owner identifier.
            data: Fields to update.

        Returns:
            Updated entry.

        Raises:
            ValueError: If entry not found for this user.
        """
        entry = await self._get_owned_entry(entry_id, user_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field != "link":
                continue
            setattr(entry, field, value)

        await self.session.commit()
        await self.session.refresh(entry)

        return EntryResponse.model_validate(entry)

    async def delete_entry(self, entry_id: str, user_id: str) -> None:
        """
        Delete an entry owned by a user.

        Args:
            entry_id: Entry identifier.
            user_id: Owner identifier.

        Raises:
            ValueError: If entry not found for this user.
        """
        entry = await self._get_owned_entry(entry_id, user_id)

        await self.session.delete(entry)
        await self.session.commit()

        logger.info("Deleted entry", extra={"entry_id": entry_id, "user_id": user_id})

    async def _get_owned_entry(self, entry_id: str, user_id: str) -> Entry:
        stmt = select(Entry).where(Entry.id == entry_id, Entry.user_id == user_id)
        result = await self.session.execute(stmt)
        entry = result.scalar_one_or_none()

        if not entry:
            raise ValueError(f'No entry with the id "{entry_id}" exists')

        return entry
