"""Tests for entry, user and timeline services against a database session."""

import datetime as dt

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from worklog_core.schemas import EntryCreate, EntryUpdate, UserCreate
from worklog_core.services import EntryService, TimelineService, UserService
from worklog_database.models import EntryPrivacy, User


async def add_entry(session: AsyncSession, user: User, **fields):
    data = {"date": "2024-01-08", "type": "work", "text": "note"}
    data.update(fields)
    return await EntryService(session).create_entry(user.id, EntryCreate(**data))


class TestFetchEntries:
    """Privacy-filtered reads."""

    @pytest.mark.asyncio
    async def test_owner_sees_all_entries(self, db_session: AsyncSession, test_user: User):
        await add_entry(db_session, test_user, id="public-1")
        await add_entry(db_session, test_user, id="private-1", privacy="owner")

        entries = await EntryService(db_session).fetch_entries(test_user.username, test_user.id)

        assert {entry.id for entry in entries} == {"public-1", "private-1"}

    @pytest.mark.asyncio
    async def test_other_viewers_see_public_entries(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        await add_entry(db_session, test_user, id="public-1")
        await add_entry(db_session, test_user, id="private-1", privacy="private")

        service = EntryService(db_session)
        as_other = await service.fetch_entries(test_user.username, other_user.id)
        as_anonymous = await service.fetch_entries(test_user.username, None)

        assert [entry.id for entry in as_other] == ["public-1"]
        assert [entry.id for entry in as_anonymous] == ["public-1"]

    @pytest.mark.asyncio
    async def test_entries_most_recent_first(self, db_session: AsyncSession, test_user: User):
        await add_entry(db_session, test_user, id="old", date="2024-01-01")
        await add_entry(db_session, test_user, id="new", date="2024-02-01")

        entries = await EntryService(db_session).fetch_entries(test_user.username, test_user.id)

        assert [entry.id for entry in entries] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_unknown_owner(self, db_session: AsyncSession):
        with pytest.raises(ValueError, match="No user with the username"):
            await EntryService(db_session).fetch_entries("nobody", None)


class TestEntryLifecycle:
    """Create, update and delete."""

    @pytest.mark.asyncio
    async def test_create_keeps_client_id(self, db_session: AsyncSession, test_user: User):
        entry = await add_entry(db_session, test_user, id="client-id", link="https://example.com")

        assert entry.id == "client-id"
        assert entry.date == dt.date(2024, 1, 8)
        assert entry.privacy is EntryPrivacy.EVERYONE
        assert entry.link == "https://example.com"

    @pytest.mark.asyncio
    async def test_create_generates_id(self, db_session: AsyncSession, test_user: User):
        entry = await add_entry(db_session, test_user)

        assert len(entry.id) == 36

    @pytest.mark.asyncio
    async def test_create_duplicate_id(self, db_session: AsyncSession, test_user: User):
        await add_entry(db_session, test_user, id="dup")

        with pytest.raises(ValueError, match="already exists"):
            await add_entry(db_session, test_user, id="dup")

    @pytest.mark.asyncio
    async def test_update_changes_given_fields(self, db_session: AsyncSession, test_user: User):
        await add_entry(db_session, test_user, id="e1", link="https://example.com")

        updated = await EntryService(db_session).update_entry(
            "e1", test_user.id, EntryUpdate(text="edited", privacy="owner", link=None)
        )

        assert updated.text == "edited"
        assert updated.privacy is EntryPrivacy.OWNER
        assert updated.link is None
        assert updated.type.value == "work"

    @pytest.mark.asyncio
    async def test_update_requires_owner(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        await add_entry(db_session, test_user, id="e1")

        with pytest.raises(ValueError, match="No entry"):
            await EntryService(db_session).update_entry("e1", other_user.id, EntryUpdate(text="x"))

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession, test_user: User):
        await add_entry(db_session, test_user, id="e1")
        service = EntryService(db_session)

        await service.delete_entry("e1", test_user.id)

        assert await service.fetch_entries(test_user.username, test_user.id) == []
        with pytest.raises(ValueError):
            await service.delete_entry("e1", test_user.id)


class TestTimelineService:
    """Journal page view model."""

    @pytest.mark.asyncio
    async def test_merges_owner_pending_submissions(
        self, db_session: AsyncSession, test_user: User
    ):
        await add_entry(db_session, test_user, id="saved", text="confirmed")
        submissions = [
            {"intent": "createEntry", "id": "saved", "date": "2024-01-08", "type": "work",
             "privacy": "everyone", "text": "optimistic", "link": ""},
            {"intent": "createEntry", "id": "in-flight", "date": "2024-01-09",
             "type": "learning", "privacy": "everyone", "text": "new", "link": ""},
        ]

        response = await TimelineService(db_session).get_timeline(
            test_user.username, test_user.id, submissions
        )

        assert response.owner_is_viewer is True
        assert response.owner.username == test_user.username
        week = response.timeline.weeks[0]
        work, learning, _ = week.sections
        assert [(e.id, e.text, e.pending) for e in work.entries] == [
            ("saved", "confirmed", False)
        ]
        assert [(e.id, e.pending) for e in learning.entries] == [("in-flight", True)]
        assert response.timeline.pending_count == 1

    @pytest.mark.asyncio
    async def test_ignores_pending_from_other_viewers(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        submissions = [
            {"intent": "createEntry", "id": "x", "date": "2024-01-09", "type": "work",
             "privacy": "everyone", "text": "injected"},
        ]

        response = await TimelineService(db_session).get_timeline(
            test_user.username, other_user.id, submissions
        )

        assert response.owner_is_viewer is False
        assert response.timeline.weeks == []

    @pytest.mark.asyncio
    async def test_reports_rejected_submissions(self, db_session: AsyncSession, test_user: User):
        submissions = [{"intent": "createEntry", "id": "bad", "date": "soon", "type": "work",
                        "text": "x"}]

        response = await TimelineService(db_session).get_timeline(
            test_user.username, test_user.id, submissions
        )

        assert response.timeline.weeks == []
        assert [rejected.id for rejected in response.timeline.rejected] == ["bad"]


class TestUserService:
    """User lookup and directory search."""

    @pytest.mark.asyncio
    async def test_duplicate_username(self, db_session: AsyncSession, test_user: User):
        with pytest.raises(ValueError, match="taken"):
            await UserService(db_session).create_user(
                UserCreate(username=test_user.username, first="A", last="B")
            )

    @pytest.mark.asyncio
    async def test_list_all_users(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        listing = await UserService(db_session).list_users()

        assert listing.total == 2
        assert {user.username for user in listing.items} == {"m-robinson", "ada"}

    @pytest.mark.asyncio
    async def test_search_ranks_exact_before_partial(self, db_session: AsyncSession):
        service = UserService(db_session)
        for username, first, last in [
            ("maxine", "Maxine", "Doe"),
            ("max", "Max", "Power"),
            ("tomax", "Tom", "Axe"),
            ("ada", "Ada", "Lovelace"),
        ]:
            await service.create_user(UserCreate(username=username, first=first, last=last))
        await db_session.commit()

        listing = await service.list_users("MAX")

        assert [user.username for user in listing.items] == ["max", "maxine", "tomax"]
        assert listing.total == 3

    @pytest.mark.asyncio
    async def test_search_matches_last_name(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        listing = await UserService(db_session).list_users("love")

        assert [user.username for user in listing.items] == ["ada"]

    @pytest.mark.asyncio
    async def test_search_without_matches(self, db_session: AsyncSession, test_user: User):
        listing = await UserService(db_session).list_users("nobody")

        assert listing.items == []
        assert listing.total == 0
