"""
Language endpoints for API v1.

Languages are a public catalog: clients list them to let players pick
the languages they speak.  Deleting a language only marks it deleted;
``includeDeleted=true`` on the single-record route still returns it.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from lobby_api.app.api.deps import ListQuery, get_language_service, parse_id
from lobby_api.app.schemas.common import MessageResponse, Page
from lobby_api.app.schemas.language import LanguageCreate, LanguageRead, LanguageUpdate
from lobby_api.app.services.language_service import LanguageService

router = APIRouter()


@router.post("/", response_model=LanguageRead, status_code=status.HTTP_201_CREATED)
async def create_language(
    language_in: LanguageCreate,
    service: LanguageService = Depends(get_language_service),
) -> LanguageRead:
    """Create a language.  ``code`` and ``name`` must not be in use."""
    return await service.create(language_in)


@router.get("/", response_model=Page[LanguageRead])
async def list_languages(
    query: ListQuery = Depends(),
    service: LanguageService = Depends(get_language_service),
) -> Page[LanguageRead]:
    """Return a page of languages.

    - **search** matches ``name`` or ``code`` as a literal substring.
    - **sortBy** is one of ``name``, ``code``, ``createdAt``, ``updatedAt``.
    """
    return await service.list_page(**query.as_kwargs())


@router.get("/all", response_model=List[LanguageRead])
async def list_all_languages(
    service: LanguageService = Depends(get_language_service),
) -> List[LanguageRead]:
    """Every live language ordered by name, without pagination."""
    return await service.list_all()


@router.get("/{language_id}", response_model=LanguageRead)
async def get_language(
    language_id: str,
    include_deleted: bool = Query(False, alias="includeDeleted"),
    service: LanguageService = Depends(get_language_service),
) -> LanguageRead:
    return await service.get(parse_id(language_id), include_deleted=include_deleted)


@router.put("/{language_id}", response_model=LanguageRead)
async def update_language(
    language_id: str,
    language_in: LanguageUpdate,
    service: LanguageService = Depends(get_language_service),
) -> LanguageRead:
    """Update the provided fields of a live language."""
    return await service.update(parse_id(language_id), language_in)


@router.delete("/{language_id}", response_model=MessageResponse)
async def delete_language(
    language_id: str,
    service: LanguageService = Depends(get_language_service),
) -> MessageResponse:
    await service.delete(parse_id(language_id))
    return MessageResponse(message="Language deleted successfully (soft delete)")
