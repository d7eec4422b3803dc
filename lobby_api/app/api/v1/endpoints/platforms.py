"""Platform catalog endpoints for API v1."""

from fastapi import APIRouter, Depends, Query, status

from lobby_api.app.api.deps import ListQuery, get_platform_service, parse_id
from lobby_api.app.schemas.common import Page
from lobby_api.app.schemas.platform import PlatformCreate, PlatformRead, PlatformUpdate
from lobby_api.app.services.catalog_services import PlatformService

router = APIRouter()


@router.get("/", response_model=Page[PlatformRead])
async def list_platforms(
    query: ListQuery = Depends(),
    service: PlatformService = Depends(get_platform_service),
) -> Page[PlatformRead]:
    """Return a page of platforms; **search** matches the name."""
    return await service.list_page(**query.as_kwargs())


@router.get("/{platform_id}", response_model=PlatformRead)
async def get_platform(
    platform_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: PlatformService = Depends(get_platform_service),
) -> PlatformRead:
    return await service.get(parse_id(platform_id), include_deleted=include_deleted)


@router.post("/", response_model=PlatformRead, status_code=status.HTTP_201_CREATED)
async def create_platform(
    platform_in: PlatformCreate,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformRead:
    return await service.create(platform_in)


@router.put("/{platform_id}", response_model=PlatformRead)
async def update_platform(
    platform_id: str,
    platform_in: PlatformUpdate,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformRead:
    return await service.update(parse_id(platform_id), platform_in)


@router.delete("/{platform_id}", response_model=PlatformRead)
async def delete_platform(
    platform_id: str,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformRead:
    """Soft delete and return the record as it now stands."""
    return await service.delete(parse_id(platform_id))
