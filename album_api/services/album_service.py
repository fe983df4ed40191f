"""앨범 서비스 — 앨범 CRUD 비즈니스 로직.

Album Service — Business logic for album CRUD.
Mutations (update/delete) require the caller to own the album; an album
owned by someone else is reported as not found and left untouched.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.album import Album
from album_api.repositories.album_repository import album_repository
from album_api.schemas.album import AlbumCreate, AlbumResponse, AlbumUpdate
from album_api.schemas.photo import PhotoResponse
from album_api.services.photo_service import photo_to_response
from album_api.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def album_to_response(album: Album) -> AlbumResponse:
    """앨범 모델을 응답 스키마로 변환합니다.

    Convert an Album model instance to an AlbumResponse schema.
    """
    return AlbumResponse(
        id=album.id,
        name=album.name,
        description=album.description,
        user_id=str(album.user_id),
        created_at=album.created_at,
    )


class AlbumService:
    """앨범 관련 비즈니스 로직을 처리하는 서비스.

    Service handling album business logic.
    """

    async def _get_owned(
        self,
        db: AsyncSession,
        album_id: int,
        user_id: UUID,
    ) -> Album:
        """호출자 소유의 앨범을 조회합니다. 없거나 타인 소유면 404.

        Fetch an album owned by the caller.

        Raises:
            NotFoundError: 앨범이 없거나 호출자 소유가 아닐 때
                           (Album absent or owned by another user)
        """
        album: Album | None = await album_repository.get_by_id(db, album_id)
        if album is None or album.user_id != user_id:
            raise NotFoundError("Album not found")
        return album

    async def list_albums(self, db: AsyncSession) -> list[AlbumResponse]:
        """전체 앨범 목록을 조회합니다.

        List all albums.
        """
        albums: list[Album] = await album_repository.get_albums(db)
        return [album_to_response(a) for a in albums]

    async def get_album(self, db: AsyncSession, album_id: int) -> AlbumResponse:
        """앨범을 조회합니다.

        Retrieve a single album.

        Raises:
            NotFoundError: 앨범을 찾을 수 없을 때 (Album not found)
        """
        album: Album | None = await album_repository.get_by_id(db, album_id)
        if album is None:
            raise NotFoundError("Album not found")
        return album_to_response(album)

    async def get_album_photos(
        self,
        db: AsyncSession,
        album_id: int,
    ) -> list[PhotoResponse]:
        """앨범의 사진 목록을 조회합니다.

        List all photos in an album.

        Raises:
            NotFoundError: 앨범을 찾을 수 없을 때 (Album not found)
        """
        album: Album | None = await album_repository.get_detail(db, album_id)
        if album is None:
            raise NotFoundError("Album not found")
        return [photo_to_response(p) for p in album.photos]

    async def create_album(
        self,
        db: AsyncSession,
        owner_id: UUID,
        data: AlbumCreate,
    ) -> AlbumResponse:
        """새 앨범을 생성합니다.

        Create a new album owned by the caller.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유자 ID (Owner UUID, from the access token)
            data: 앨범 생성 데이터 (Album creation data)

        Returns:
            AlbumResponse: 생성된 앨범 응답 (Created album response)
        """
        album: Album = await album_repository.create(
            db,
            {
                "name": data.name,
                "description": data.description,
                "user_id": owner_id,
            },
        )
        logger.info("Album %s created by user %s", album.id, owner_id)
        return album_to_response(album)

    async def update_album(
        self,
        db: AsyncSession,
        album_id: int,
        user_id: UUID,
        data: AlbumUpdate,
    ) -> AlbumResponse:
        """앨범 정보를 수정합니다. 소유자만 가능.

        Update an album. Only the owner may update it.

        Raises:
            NotFoundError: 앨범이 없거나 호출자 소유가 아닐 때
                           (Album absent or not owned by the caller)
        """
        await self._get_owned(db, album_id, user_id)

        update_data: dict = data.model_dump(exclude_unset=True)
        # 이름은 NOT NULL — explicit null name is ignored
        if update_data.get("name") is None:
            update_data.pop("name", None)
        album: Album | None = await album_repository.update(db, album_id, update_data)
        if album is None:
            raise NotFoundError("Album not found")
        return album_to_response(album)

    async def delete_album(
        self,
        db: AsyncSession,
        album_id: int,
        user_id: UUID,
    ) -> None:
        """앨범과 소속 사진을 삭제합니다. 소유자만 가능.

        Delete an album together with its photos. Only the owner may delete it;
        another user's album is never deleted.

        Raises:
            NotFoundError: 앨범이 없거나 호출자 소유가 아닐 때
                           (Album absent or not owned by the caller)
        """
        await self._get_owned(db, album_id, user_id)
        await album_repository.delete(db, album_id)
        logger.info("Album %s deleted by user %s", album_id, user_id)


# 싱글턴 인스턴스 — Singleton instance
album_service: AlbumService = AlbumService()
