"""
Game rank endpoints for API v1.

Ranks are listed in ladder order by default (``sortBy=order``).  Every
rank references a live game through ``gameId``.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from lobby_api.app.api.deps import ListQuery, get_game_rank_service, parse_id
from lobby_api.app.schemas.common import Page
from lobby_api.app.schemas.game_rank import GameRankCreate, GameRankRead, GameRankUpdate
from lobby_api.app.services.catalog_services import GameRankService

router = APIRouter()


@router.get("/", response_model=Page[GameRankRead])
async def list_game_ranks(
    query: ListQuery = Depends(),
    service: GameRankService = Depends(get_game_rank_service),
) -> Page[GameRankRead]:
    return await service.list_page(**query.as_kwargs())


@router.get("/{rank_id}", response_model=GameRankRead)
async def get_game_rank(
    rank_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: GameRankService = Depends(get_game_rank_service),
) -> GameRankRead:
    return await service.get(parse_id(rank_id), include_deleted=include_deleted)


@router.post("/", response_model=GameRankRead, status_code=status.HTTP_201_CREATED)
async def create_game_rank(
    rank_in: GameRankCreate,
    service: GameRankService = Depends(get_game_rank_service),
) -> GameRankRead:
    """Create a rank; returns 404 when ``gameId`` is unknown or deleted."""
    return await service.create(rank_in)


@router.put("/{rank_id}", response_model=GameRankRead)
async def update_game_rank(
    rank_id: str,
    rank_in: GameRankUpdate,
    service: GameRankService = Depends(get_game_rank_service),
) -> GameRankRead:
    return await service.update(parse_id(rank_id), rank_in)


@router.delete("/{rank_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game_rank(
    rank_id: str,
    service: GameRankService = Depends(get_game_rank_service),
) -> Response:
    await service.delete(parse_id(rank_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
