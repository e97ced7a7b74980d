"""
Users router.

Provides the user directory and per-user journal endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from worklog_core.schemas import (
    EntryResponse,
    TimelineRequest,
    TimelineResponse,
    UserListResponse,
    UserResponse,
)
from worklog_core.services import EntryService, TimelineService, UserService

from ..dependencies import (
    get_current_user,
    get_entry_service,
    get_optional_user,
    get_timeline_service,
    get_user_service,
)

router = APIRouter()


def _viewer_id(viewer: UserResponse | None) -> str | None:
    return viewer.id if viewer else None


@router.get("")
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
    q: str | None = None,
) -> UserListResponse:
    """
    List users, optionally filtered by a search query.

    Args:
        user_service: User service.
        q: Optional search text.

    Returns:
        User directory listing.
    """
    return await user_service.list_users(q)


@router.get("/me")
async def get_me(
    current_user: Annotated[UserResponse, Depends(get_current_user)],
) -> UserResponse:
    """
    Get current authenticated user information.

    Args:
        current_user: Current authenticated user from token.

    Returns:
        User profile data.
    """
    return current_user


@router.get("/{username}/entries")
async def list_user_entries(
    username: str,
    viewer: Annotated[UserResponse | None, Depends(get_optional_user)],
    entry_service: Annotated[EntryService, Depends(get_entry_service)],
) -> list[EntryResponse]:
    """
    Get the entries of a user's journal visible to the viewer.

    Args:
        username: Journal owner username.
        viewer: Signed-in user, if any.
        entry_service: Entry service.

    Returns:
        Entries, most recent first.

    Raises:
        HTTPException: If the user does not exist.
    """
    try:
        return await entry_service.fetch_entries(username, _viewer_id(viewer))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.get("/{username}/timeline")
async def get_timeline(
    username: str,
    viewer: Annotated[UserResponse | None, Depends(get_optional_user)],
    timeline_service: Annotated[TimelineService, Depends(get_timeline_service)],
) -> TimelineResponse:
    """
    Get a user's journal grouped by week and category.

    Args:
        username: Journal owner username.
        viewer: Signed-in user, if any.
        timeline_service: Timeline service.

    Returns:
        Journal timeline.

    Raises:
        HTTPException: If the user does not exist.
    """
    try:
        return await timeline_service.get_timeline(username, _viewer_id(viewer))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("/{username}/timeline")
async def get_timeline_with_pending(
    username: str,
    data: TimelineRequest,
    viewer: Annotated[UserResponse | None, Depends(get_optional_user)],
    timeline_service: Annotated[TimelineService, Depends(get_timeline_service)],
) -> TimelineResponse:
    """
    Get a user's journal merged with the viewer's in-flight submissions.

    Args:
        username: Journal owner username.
        data: Raw form fields of each in-flight request.
        viewer: Signed-in user, if any.
        timeline_service: Timeline service.

    Returns:
        Journal timeline including pending entries.

    Raises:
        HTTPException: If the user does not exist.
    """
    try:
        return await timeline_service.get_timeline(
            username, _viewer_id(viewer), data.pending
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
