"""
Game catalog endpoints for API v1.

Games are referenced by ranks and by players' favourites.  A deleted
game stays readable with ``includeDeleted=true`` but can no longer be
referenced by new ranks or favourites.
"""

from fastapi import APIRouter, Depends, Query, status

from lobby_api.app.api.deps import ListQuery, get_game_service, parse_id
from lobby_api.app.schemas.common import Page
from lobby_api.app.schemas.game import GameCreate, GameRead, GameUpdate
from lobby_api.app.services.catalog_services import GameService

router = APIRouter()


@router.get("/", response_model=Page[GameRead])
async def list_games(
    query: ListQuery = Depends(),
    service: GameService = Depends(get_game_service),
) -> Page[GameRead]:
    return await service.list_page(**query.as_kwargs())


@router.get("/{game_id}", response_model=GameRead)
async def get_game(
    game_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: GameService = Depends(get_game_service),
) -> GameRead:
    return await service.get(parse_id(game_id), include_deleted=include_deleted)


@router.post("/", response_model=GameRead, status_code=status.HTTP_201_CREATED)
async def create_game(
    game_in: GameCreate,
    service: GameService = Depends(get_game_service),
) -> GameRead:
    return await service.create(game_in)


@router.put("/{game_id}", response_model=GameRead)
async def update_game(
    game_id: str,
    game_in: GameUpdate,
    service: GameService = Depends(get_game_service),
) -> GameRead:
    return await service.update(parse_id(game_id), game_in)


@router.delete("/{game_id}", response_model=GameRead)
async def delete_game(
    game_id: str,
    service: GameService = Depends(get_game_service),
) -> GameRead:
    """Soft delete and return the record as it now stands."""
    return await service.delete(parse_id(game_id))
