"""
Entries router.

Provides endpoints for creating and managing the signed-in user's entries.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from worklog_core.schemas import EntryCreate, EntryResponse, EntryUpdate, UserResponse
from worklog_core.services import EntryService

from ..dependencies import get_current_user, get_entry_service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    data: EntryCreate,
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    entry_service: Annotated[EntryService, Depends(get_entry_service)],
) -> EntryResponse:
    """
    Create an entry.

    Args:
        data: Entry data, with an optional client-generated id.
        current_user: Current authenticated user.
        entry_service: Entry service.

    Returns:
        Created entry.

    Raises:
        HTTPException: If an entry with the same id already exists.
    """
    try:
        return await entry_service.create_entry(current_user.id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None


@router.get("/{entry_id}")
async def get_entry(
    entry_id: str,
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    entry_service: Annotated[EntryService, Depends(get_entry_service)],
) -> EntryResponse:
    """
    Get one of the current user's entries for editing.

    Args:
        entry_id: Entry identifier.
        current_user: Current authenticated user.
        entry_service: Entry service.

    Returns:
        Entry details.

    Raises:
        HTTPException: If entry not found.
    """
    try:
        return await entry_service.get_entry(entry_id, current_user.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.patch("/{entry_id}")
async def update_entry(
    entry_id: str,
    data: EntryUpdate,
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    entry_service: Annotated[EntryService, Depends(get_entry_service)],
) -> EntryResponse:
    """
    Update one of the current user's entries.

    Args:
        entry_id: Entry identifier.
        data: Fields to update.
        current_user: Current authenticated user.
        entry_service: Entry service.

    Returns:
        Updated entry.

    Raises:
        HTTPException: If entry not found.
    """
    try:
        return await entry_service.update_entry(entry_id, current_user.id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: str,
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    entry_service: Annotated[EntryService, Depends(get_entry_service)],
) -> Response:
    """
    Delete one of the current user's entries.

    Args:
        entry_id: Entry identifier.
        current_user: Current authenticated user.
        entry_service: Entry service.

    Raises:
        HTTPException: If entry not found.
    """
    try:
        await entry_service.delete_entry(entry_id, current_user.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
