"""사용자 서비스 — 사용자 및 사용자 소유 앨범/사진 조회.

User Service — Lookup of users and the albums/photos they own.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.user import User
from album_api.repositories.album_repository import album_repository
from album_api.repositories.photo_repository import photo_repository
from album_api.repositories.user_repository import user_repository
from album_api.schemas.album import AlbumResponse
from album_api.schemas.photo import PhotoResponse
from album_api.schemas.user import UserResponse
from album_api.services.album_service import album_to_response
from album_api.services.photo_service import photo_to_response
from album_api.utils.exceptions import NotFoundError


class UserService:
    """사용자 조회 비즈니스 로직을 처리하는 서비스.

    Service handling user lookups.
    """

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            username=user.username,
            created_at=user.created_at,
        )

    async def _get_or_404(self, db: AsyncSession, user_id: UUID) -> User:
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def list_users(self, db: AsyncSession) -> list[UserResponse]:
        """전체 사용자 목록을 조회합니다.

        List all users ordered by username.
        """
        users: list[User] = await user_repository.get_users(db)
        return [self._to_response(u) for u in users]

    async def get_user(self, db: AsyncSession, user_id: UUID) -> UserResponse:
        """사용자를 조회합니다.

        Retrieve a single user.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        return self._to_response(await self._get_or_404(db, user_id))

    async def get_user_albums(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[AlbumResponse]:
        """사용자가 소유한 앨범 목록을 조회합니다.

        List albums owned by a user.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        await self._get_or_404(db, user_id)
        albums = await album_repository.get_by_user(db, user_id)
        return [album_to_response(a) for a in albums]

    async def get_user_photos(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[PhotoResponse]:
        """사용자가 소유한 사진 목록을 조회합니다.

        List photos owned by a user, across all of their albums.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        await self._get_or_404(db, user_id)
        photos = await photo_repository.get_by_user(db, user_id)
        return [photo_to_response(p) for p in photos]


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
