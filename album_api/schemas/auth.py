"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Registration request schema.

    Attributes:
        username: 로그인 아이디 (Login username)
        password: 평문 비밀번호 (Plain text password, hashed before storage)
        email: 이메일 (Email address, optional)
    """

    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6)
    email: str | None = None


class LoginRequest(BaseModel):
    """로그인 요청 스키마."""

    username: str
    password: str


class RefreshRequest(BaseModel):
    """토큰 갱신 요청 스키마."""

    refresh_token: str


class TokenResponse(BaseModel):
    """토큰 응답 스키마.

    Token pair returned from login, register and refresh.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserMeResponse(BaseModel):
    """현재 사용자 프로필 응답 스키마."""

    id: str
    username: str
    email: str | None = None
    created_at: datetime
