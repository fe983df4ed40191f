"""인증 서비스 — 회원가입, 로그인, 토큰 갱신 비즈니스 로직.

Auth Service — Business logic for registration, login and token refresh.
The access token's ``sub`` claim is the identity every ownership check
in the album/photo services is made against.
"""

import logging
from uuid import UUID

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.user import User
from album_api.repositories.user_repository import user_repository
from album_api.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UserMeResponse,
)
from album_api.utils.exceptions import DuplicateError, UnauthorizedError
from album_api.utils.jwt import create_access_token, create_refresh_token, decode_token
from album_api.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, user: User) -> dict[str, str]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT payload from user data.
        """
        return {
            "sub": str(user.id),
            "name": user.username,
        }

    def _generate_tokens(self, user: User) -> TokenResponse:
        payload: dict[str, str] = self._build_jwt_payload(user)
        return TokenResponse(
            access_token=create_access_token(payload),
            refresh_token=create_refresh_token(payload),
        )

    async def register(self, db: AsyncSession, data: RegisterRequest) -> TokenResponse:
        """새 사용자를 등록하고 토큰을 발급합니다.

        Register a new user and issue a token pair.

        Raises:
            DuplicateError: 사용자명이 이미 사용 중일 때 (Username already taken)
        """
        if await user_repository.exists(db, {"username": data.username}):
            raise DuplicateError("Username already exists")

        try:
            user: User = await user_repository.create(
                db,
                {
                    "username": data.username,
                    "email": data.email,
                    "password_hash": hash_password(data.password),
                },
            )
        except IntegrityError:
            # 동시 가입 — another registration won the unique username
            await db.rollback()
            raise DuplicateError("Username already exists")
        logger.info("User %s registered", user.username)
        return self._generate_tokens(user)

    async def login(self, db: AsyncSession, data: LoginRequest) -> TokenResponse:
        """사용자명/비밀번호로 로그인합니다.

        Authenticate with username and password.

        Raises:
            UnauthorizedError: 자격 증명이 올바르지 않을 때 (Invalid credentials)
        """
        user: User | None = await user_repository.get_by_username(db, data.username)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid username or password")
        return self._generate_tokens(user)

    async def refresh_tokens(self, db: AsyncSession, data: RefreshRequest) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Exchange a refresh token for a new token pair.

        Raises:
            UnauthorizedError: 토큰이 유효하지 않거나 만료되었거나 사용자가 없을 때
                               (Invalid/expired token, wrong type, or unknown user)
        """
        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid or expired refresh token")

        if payload.get("type") != "refresh" or payload.get("sub") is None:
            raise UnauthorizedError("Invalid refresh token")

        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            raise UnauthorizedError("Invalid refresh token")

        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise UnauthorizedError("User not found")
        return self._generate_tokens(user)

    def get_me(self, user: User) -> UserMeResponse:
        """현재 사용자 프로필을 반환합니다.

        Return the authenticated user's profile.
        """
        return UserMeResponse(
            id=str(user.id),
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
