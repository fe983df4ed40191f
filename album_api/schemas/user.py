"""사용자 Pydantic 응답 스키마 정의.

User response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel


class UserResponse(BaseModel):
    """사용자 응답 스키마.

    Public user response schema (no credentials).

    Attributes:
        id: 사용자 UUID 문자열 (User UUID as string)
        username: 사용자명 (Username)
        created_at: 가입 일시 (Registration timestamp)
    """

    id: str
    username: str
    created_at: datetime
