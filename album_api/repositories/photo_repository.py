"""사진 레포지토리 — 사진 CRUD, 좋아요/댓글 컬렉션 영속화.

Photo Repository — CRUD for photos and persistence of their
like/comment collections.

Collections are always eager-loaded (selectinload) before services touch
them; lazy loading is not available on an AsyncSession.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from album_api.models.photo import Comment, Photo
from album_api.repositories.base import BaseRepository


class PhotoRepository(BaseRepository[Photo]):
    """사진 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for photos, likes, comments and replies.
    """

    def __init__(self) -> None:
        super().__init__(Photo)

    def _detail_query(self) -> Select:
        # 좋아요/댓글/답글 일괄 로드 — likes, comments and replies in one pass
        return (
            select(Photo)
            .options(
                selectinload(Photo.likes),
                selectinload(Photo.comments).selectinload(Comment.replies),
            )
            .execution_options(populate_existing=True)
        )

    async def get_photos(self, db: AsyncSession) -> list[Photo]:
        """모든 사진을 조회합니다.

        Retrieve all photos ordered by id.
        """
        result = await db.execute(select(Photo).order_by(Photo.id))
        return list(result.scalars().all())

    async def get_by_album(self, db: AsyncSession, album_id: int) -> list[Photo]:
        """앨범에 속한 사진 목록을 조회합니다.

        Retrieve all photos in an album.
        """
        query: Select = (
            select(Photo)
            .where(Photo.album_id == album_id)
            .order_by(Photo.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> list[Photo]:
        """사용자가 소유한 사진 목록을 조회합니다.

        Retrieve all photos owned by a user.
        """
        query: Select = (
            select(Photo)
            .where(Photo.user_id == user_id)
            .order_by(Photo.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_detail(self, db: AsyncSession, photo_id: int) -> Photo | None:
        """사진을 좋아요/댓글/답글과 함께 조회합니다.

        Retrieve a photo with likes, comments and replies eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            photo_id: 사진 ID (Photo id)

        Returns:
            Photo | None: 컬렉션이 로드된 사진 또는 None (Photo with collections, or None)
        """
        result = await db.execute(self._detail_query().where(Photo.id == photo_id))
        return result.scalar_one_or_none()

    async def get_comment(self, db: AsyncSession, comment_id: int) -> Comment | None:
        """댓글을 답글과 함께 조회합니다.

        Retrieve a comment with its replies.
        """
        query: Select = (
            select(Comment)
            .options(selectinload(Comment.replies))
            .where(Comment.id == comment_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def update_photo(self, db: AsyncSession, photo: Photo) -> Photo:
        """메모리에서 변경된 사진(좋아요/답글 컬렉션 포함)을 저장합니다.

        Persist in-memory changes on a photo, including its like and reply
        collections, and return it with collections reloaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            photo: 변경된 사진 (Photo loaded via get_detail and mutated)

        Returns:
            Photo: 저장 후 다시 로드된 사진 (Reloaded photo)
        """
        db.add(photo)
        await db.flush()
        reloaded: Photo | None = await self.get_detail(db, photo.id)
        assert reloaded is not None
        return reloaded

    async def update_comments(
        self,
        db: AsyncSession,
        photo_id: int,
        comments: list[Comment],
    ) -> Photo | None:
        """사진의 댓글 컬렉션을 주어진 목록으로 동기화합니다.

        Synchronize a photo's stored comment collection with ``comments``.
        New comments are inserted; comments missing from the list are
        deleted as orphans together with their replies.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            photo_id: 사진 ID (Photo id)
            comments: 저장할 댓글 목록 (Desired comment collection)

        Returns:
            Photo | None: 갱신된 사진 또는 None (Updated photo, or None if absent)
        """
        stored: Photo | None = await self.get_detail(db, photo_id)
        if stored is None:
            return None

        stored.comments = list(comments)
        await db.flush()
        return await self.get_detail(db, photo_id)


# 싱글턴 인스턴스 — Singleton instance
photo_repository: PhotoRepository = PhotoRepository()
