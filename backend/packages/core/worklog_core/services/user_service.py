"""
User service.

Handles user lookup and the user directory.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from worklog_core.schemas import UserCreate, UserListResponse, UserResponse
from worklog_database.models import User


def _match_rank(user: User, query: str) -> int | None:
    """
    Rank how well a user matches a search query.

    Returns:
        0 for an exact match, 1 for a prefix match, 2 for a substring match,
        or None when no searchable field contains the query.
    """
    fields = [user.username.lower(), user.first.lower(), user.last.lower()]
    if query in fields:
        return 0
    if any(field.startswith(query) for field in fields):
        return 1
    if any(query in field for field in fields):
        return 2
    return None


class UserService:
    """User management service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize user service.

        Args:
            session: Database session.
        """
        self.session = session

    async def create_user(self, user_create: UserCreate) -> User:
        """
        Create a new user.

        Args:
            user_create: User creation data.

        Returns:
            Created user instance.

        Raises:
            ValueError: If the username is taken.
        """
        if await self.find_by_username(user_create.username):
            raise ValueError("Username already taken")

        user = User(
            username=user_create.username,
            first=user_create.first,
            last=user_create.last,
        )

        self.session.add(user)
        await self.session.flush()
        return user

    async def find_by_username(self, username: str) -> User | None:
        """Look up a user by username."""
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User:
        """
        Get user by username.

        Args:
            username: Public username.

        Returns:
            User instance.

        Raises:
            ValueError: If user not found.
        """
        user = await self.find_by_username(username)
        if not user:
            raise ValueError(f'No user with the username "{username}" exists.')
        return user

    async def get_user(self, user_id: str) -> UserResponse:
        """
        Get user by ID.

        Args:
            user_id: User identifier.

        Returns:
            User response.

        Raises:
            ValueError: If user not found.
        """
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()

        if not user:
            raise ValueError("User not found")

        return UserResponse.model_validate(user)

    async def list_users(self, query: str | None = None) -> UserListResponse:
        """
        List users, oldest accounts first.

        When a query is given only matching users are returned, best matches
        first.

        Args:
            query: Optional search text matched against username and names.

        Returns:
            User directory listing.
        """
        stmt = select(User).order_by(User.created_at, User.username)
        result = await self.session.execute(stmt)
        users = list(result.scalars().all())

        needle = (query or "").strip().lower()
        if needle:
            matches = []
            for position, user in enumerate(users):
                rank = _match_rank(user, needle)
                if rank is not None:
                    matches.append((rank, position, user))
            matches.sort(key=lambda match: match[:2])
            users = [user for _, _, user in matches]

        items = [UserResponse.model_validate(user) for user in users]
        return UserListResponse(items=items, total=len(items))
