"""Character HTTP Controller."""

from typing import Annotated

from fastapi import APIRouter, Depends

from character_lookup.application.lookup import GetCharacterQuery
from character_lookup.presentation.http.schemas import CharacterResponse, MessageResponse
from character_lookup.setup.dependencies import get_character_query

router = APIRouter(prefix="/character", tags=["character"])


@router.get(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="캐릭터 단건 조회",
    description="ID로 캐릭터를 조회합니다. 결과는 characters 캐시 리전에 캐시됩니다.",
    responses={404: {"model": MessageResponse, "description": "캐릭터 없음"}},
)
async def get_character(
    character_id: int,
    query: Annotated[GetCharacterQuery, Depends(get_character_query)],
) -> CharacterResponse:
    """캐릭터를 조회합니다. 없으면 CharacterNotFoundError (→ 404)."""
    character = await query.execute(character_id)

    return CharacterResponse(
        id=character.id,
        first_name=character.first_name,
        last_name=character.last_name,
        nick_name=character.nick_name,
    )
