"""
Game platform link endpoints.

Links are listed in full (no pagination) and deleting one removes it;
the deleted link is returned in the response body.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from lobby_api.app.api.deps import get_game_platform_service, parse_id
from lobby_api.app.schemas.game_platform import GamePlatformCreate, GamePlatformRead, GamePlatformUpdate
from lobby_api.app.services.game_platform_service import GamePlatformService

router = APIRouter()


@router.get("/", response_model=List[GamePlatformRead])
async def list_game_platforms(
    service: GamePlatformService = Depends(get_game_platform_service),
) -> List[GamePlatformRead]:
    return await service.list_all()


@router.get("/{link_id}", response_model=GamePlatformRead)
async def get_game_platform(
    link_id: str,
    service: GamePlatformService = Depends(get_game_platform_service),
) -> GamePlatformRead:
    return await service.get(parse_id(link_id))


@router.post("/", response_model=GamePlatformRead, status_code=status.HTTP_201_CREATED)
async def create_game_platform(
    link_in: GamePlatformCreate,
    service: GamePlatformService = Depends(get_game_platform_service),
) -> GamePlatformRead:
    return await service.create(link_in)


@router.put("/{link_id}", response_model=GamePlatformRead)
async def update_game_platform(
    link_id: str,
    link_in: GamePlatformUpdate,
    service: GamePlatformService = Depends(get_game_platform_service),
) -> GamePlatformRead:
    return await service.update(parse_id(link_id), link_in)


@router.delete("/{link_id}", response_model=GamePlatformRead)
async def delete_game_platform(
    link_id: str,
    service: GamePlatformService = Depends(get_game_platform_service),
) -> GamePlatformRead:
    return await service.delete(parse_id(link_id))
