"""
FastAPI dependencies.

Provides dependency injection for database sessions, authentication, and services.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from worklog_core.auth import JWTConfig, verify_token
from worklog_core.schemas import UserResponse
from worklog_core.services import EntryService, TimelineService, UserService
from worklog_database.session import get_session

from .config import settings

# Security scheme for JWT bearer tokens; missing credentials are handled below
security = HTTPBearer(auto_error=False)


def get_jwt_config() -> JWTConfig:
    """
    Get JWT configuration.

    Returns:
        JWT configuration instance.
    """
    return JWTConfig(
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    )


async def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session: Annotated[AsyncSession, Depends(get_session)],
    jwt_config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> UserResponse | None:
    """
    Get the signed-in user, if any.

    Missing, invalid or expired tokens make the request anonymous.

    Args:
        credentials: HTTP bearer credentials.
        session: Database session.
        jwt_config: JWT configuration.

    Returns:
        Current user information, or None for anonymous viewers.
    """
    if credentials is None:
        return None

    token_data = verify_token(credentials.credentials, jwt_config)
    if not token_data or token_data.type != "access":
        return None

    try:
        return await UserService(session).get_user(token_data.sub)
    except ValueError:
        return None


async def get_current_user(
    user: Annotated[UserResponse | None, Depends(get_optional_user)],
) -> UserResponse:
    """
    Get current authenticated user from JWT token.

    Args:
        user: Signed-in user, if any.

    Returns:
        Current user information.

    Raises:
        HTTPException: If the request is not authenticated.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# Service dependencies
def get_user_service(session: Annotated[AsyncSession, Depends(get_session)]) -> UserService:
    """Get user service instance."""
    return UserService(session)


def get_entry_service(session: Annotated[AsyncSession, Depends(get_session)]) -> EntryService:
    """Get entry service instance."""
    return EntryService(session)


def get_timeline_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TimelineService:
    """Get timeline service instance."""
    return TimelineService(session)
