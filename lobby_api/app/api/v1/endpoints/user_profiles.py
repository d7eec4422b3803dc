"""
User profile endpoints for API v1.

Write operations answer with an envelope ``{success, message, data}``.
Updates and deletes are guarded by the profile's ``rowVersion``: a
client sends back the version it last read and receives 409 when
somebody else changed the profile in between.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from lobby_api.app.api.deps import ListQuery, get_user_profile_service, parse_id
from lobby_api.app.schemas.common import Page
from lobby_api.app.schemas.user_profile import (
    UserProfileCreate,
    UserProfileEnvelope,
    UserProfileRead,
    UserProfileUpdate,
)
from lobby_api.app.services.user_profile_service import UserProfileService

router = APIRouter()


@router.get("/", response_model=Page[UserProfileRead])
async def list_user_profiles(
    query: ListQuery = Depends(),
    service: UserProfileService = Depends(get_user_profile_service),
) -> Page[UserProfileRead]:
    """Return a page of profiles.

    - **search** matches ``userName``, ``firstName`` or ``lastName``.
    - **sortBy** is one of ``userName``, ``lastOnline``, ``createdAt``, ``updatedAt``.
    """
    return await service.list_page(**query.as_kwargs())


@router.get("/by-username/{user_name}", response_model=UserProfileRead)
async def get_user_profile_by_user_name(
    user_name: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: UserProfileService = Depends(get_user_profile_service),
) -> UserProfileRead:
    return await service.get_by_user_name(user_name, include_deleted=include_deleted)


@router.get("/{user_id}", response_model=UserProfileRead)
async def get_user_profile(
    user_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: UserProfileService = Depends(get_user_profile_service),
) -> UserProfileRead:
    return await service.get(parse_id(user_id), include_deleted=include_deleted)


@router.post("/", response_model=UserProfileEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user_profile(
    profile_in: UserProfileCreate,
    service: UserProfileService = Depends(get_user_profile_service),
) -> UserProfileEnvelope:
    profile = await service.create(profile_in)
    return UserProfileEnvelope(message="User profile created successfully", data=profile)


@router.patch("/{user_id}", response_model=UserProfileEnvelope)
async def update_user_profile(
    user_id: str,
    profile_in: UserProfileUpdate,
    service: UserProfileService = Depends(get_user_profile_service),
) -> UserProfileEnvelope:
    """Partially update a profile.

    The body must contain ``rowVersion`` and at least one other field.
    Enum fields sent as ``null`` are reset to ``unknown``.
    """
    profile = await service.update(parse_id(user_id), profile_in)
    return UserProfileEnvelope(message="User profile updated successfully", data=profile)


@router.delete("/{user_id}", response_model=UserProfileEnvelope)
async def delete_user_profile(
    user_id: str,
    row_version: Optional[str] = Query(None, alias="rowVersion"),
    service: UserProfileService = Depends(get_user_profile_service),
) -> UserProfileEnvelope:
    """Soft delete a profile, optionally checking ``rowVersion`` first."""
    profile = await service.delete(parse_id(user_id), expected_row_version=row_version)
    return UserProfileEnvelope(message="User profile deleted successfully", data=profile)
