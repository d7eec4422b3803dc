"""
Favourite game endpoints, nested under a user profile.

``gameId`` travels as a digit string in both the body and the path.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from lobby_api.app.api.deps import get_favorite_game_service, parse_id
from lobby_api.app.schemas.favorite_game import FavoriteGameCreate, FavoriteGameListItem, FavoriteGameRead
from lobby_api.app.services.favorite_game_service import FavoriteGameService

router = APIRouter()


@router.post("/", response_model=FavoriteGameRead, status_code=status.HTTP_201_CREATED)
async def add_favorite_game(
    user_id: str,
    favorite_in: FavoriteGameCreate,
    service: FavoriteGameService = Depends(get_favorite_game_service),
) -> FavoriteGameRead:
    return await service.add(parse_id(user_id), favorite_in)


@router.get("/", response_model=List[FavoriteGameListItem])
async def list_favorite_games(
    user_id: str,
    service: FavoriteGameService = Depends(get_favorite_game_service),
) -> List[FavoriteGameListItem]:
    """The user's favourites with game names, in the order they were added."""
    return await service.list_for_user(parse_id(user_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite_game(
    user_id: str,
    game_id: str,
    service: FavoriteGameService = Depends(get_favorite_game_service),
) -> Response:
    await service.remove(parse_id(user_id), parse_id(game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
