"""Distributor (storefront) endpoints for API v1."""

from fastapi import APIRouter, Depends, Query, status

from lobby_api.app.api.deps import ListQuery, get_distributor_service, parse_id
from lobby_api.app.schemas.common import Page
from lobby_api.app.schemas.distributor import DistributorCreate, DistributorRead, DistributorUpdate
from lobby_api.app.services.catalog_services import DistributorService

router = APIRouter()


@router.get("/", response_model=Page[DistributorRead])
async def list_distributors(
    query: ListQuery = Depends(),
    service: DistributorService = Depends(get_distributor_service),
) -> Page[DistributorRead]:
    return await service.list_page(**query.as_kwargs())


@router.get("/{distributor_id}", response_model=DistributorRead)
async def get_distributor(
    distributor_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorRead:
    return await service.get(parse_id(distributor_id), include_deleted=include_deleted)


@router.post("/", response_model=DistributorRead, status_code=status.HTTP_201_CREATED)
async def create_distributor(
    distributor_in: DistributorCreate,
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorRead:
    return await service.create(distributor_in)


@router.put("/{distributor_id}", response_model=DistributorRead)
async def update_distributor(
    distributor_id: str,
    distributor_in: DistributorUpdate,
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorRead:
    return await service.update(parse_id(distributor_id), distributor_in)


@router.delete("/{distributor_id}", response_model=DistributorRead)
async def delete_distributor(
    distributor_id: str,
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorRead:
    """Soft delete and return the record as it now stands."""
    return await service.delete(parse_id(distributor_id))
