"""앨범 관련 Pydantic 요청/응답 스키마 정의.

Album request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class AlbumCreate(BaseModel):
    """앨범 생성 요청 스키마.

    Album creation request schema.
    The album is owned by the authenticated user.

    Attributes:
        name: 앨범 이름 (Album name)
        description: 설명 (Description, optional)
    """

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class AlbumUpdate(BaseModel):
    """앨범 수정 요청 스키마 (부분 업데이트).

    Album update request schema (partial update).
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class AlbumResponse(BaseModel):
    """앨범 응답 스키마.

    Attributes:
        id: 앨범 ID (Album id)
        name: 앨범 이름 (Album name)
        description: 설명 (Description)
        user_id: 소유자 UUID 문자열 (Owner UUID as string)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: int
    name: str
    description: str | None = None
    user_id: str
    created_at: datetime
