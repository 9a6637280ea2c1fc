"""Character HTTP Schemas."""

from pydantic import BaseModel, Field


class CharacterResponse(BaseModel):
    """캐릭터 응답 (camelCase JSON)."""

    id: int = Field(..., description="캐릭터 ID")
    first_name: str = Field(..., description="이름", alias="firstName")
    last_name: str = Field(..., description="성", alias="lastName")
    nick_name: str | None = Field(None, description="별명", alias="nickName")

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    """오류 메시지 응답."""

    message: str = Field(..., description="오류 메시지")
