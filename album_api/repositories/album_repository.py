"""앨범 레포지토리 — 앨범 CRUD 및 관련 쿼리.

Album Repository — CRUD and related queries for albums.
Extends BaseRepository with owner lookups and photo eager loading.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from album_api.models.album import Album
from album_api.repositories.base import BaseRepository


class AlbumRepository(BaseRepository[Album]):
    """앨범 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the albums table.
    """

    def __init__(self) -> None:
        super().__init__(Album)

    async def get_albums(self, db: AsyncSession) -> list[Album]:
        """모든 앨범을 조회합니다.

        Retrieve all albums ordered by id.
        """
        result = await db.execute(select(Album).order_by(Album.id))
        return list(result.scalars().all())

    async def get_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[Album]:
        """사용자가 소유한 앨범 목록을 조회합니다.

        Retrieve all albums owned by a user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유자 ID (Owner UUID)

        Returns:
            list[Album]: 앨범 목록 (List of albums)
        """
        query: Select = (
            select(Album)
            .where(Album.user_id == user_id)
            .order_by(Album.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_detail(
        self,
        db: AsyncSession,
        album_id: int,
    ) -> Album | None:
        """앨범을 사진 목록과 함께 조회합니다.

        Retrieve an album with its photos eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            album_id: 앨범 ID (Album id)

        Returns:
            Album | None: 사진이 로드된 앨범 또는 None (Album with photos, or None)
        """
        query: Select = (
            select(Album)
            .options(selectinload(Album.photos))
            .where(Album.id == album_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
album_repository: AlbumRepository = AlbumRepository()
