"""공통 CRUD 레포지토리 — 사용자/앨범/사진 레포지토리의 부모 클래스.

Shared CRUD repository for the photo album aggregates.
UserRepository, AlbumRepository and PhotoRepository inherit plain
single-table operations from here and add their own eager-loading queries.

Key types:
    - 사용자는 UUID 기본키, 앨범/사진/댓글은 정수 기본키
      (users are keyed by UUID; albums, photos and comments by integer)
    - 삭제는 ORM cascade를 따름: 앨범 → 사진 → 좋아요/댓글 → 답글
      (deletes follow the ORM cascade: album → photos → likes/comments → replies)

Usage:
    class AlbumRepository(BaseRepository[Album]):
        def __init__(self) -> None:
            super().__init__(Album)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.database import Base

# 관리 대상 ORM 모델 — User, Album, Photo 등
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """모델 하나에 대한 단일 테이블 CRUD.

    Single-table CRUD for one ORM model. Every method flushes but never
    commits; the router that owns the request commits.

    Attributes:
        model: 관리 대상 모델 클래스 (Model class, e.g. Album or Photo)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: Any,
    ) -> ModelType | None:
        """기본키로 조회합니다. 컬렉션은 로드하지 않음.

        Look up a row by primary key (UUID for users, int for albums/photos).
        Relationship collections are not loaded; use the aggregate's
        ``get_detail`` when likes, comments or photos are needed.

        Returns:
            ModelType | None: 레코드, 없으면 None (Row, or None when absent)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """등호 필터로 목록을 조회합니다.

        List rows matching equality filters such as ``{"user_id": owner_id}``
        or ``{"album_id": 3}``. Unknown column names and None values are
        ignored. Rows come back in id order unless ``order_by`` is given.
        """
        query: Select = select(self.model)

        for column_name, value in (filters or {}).items():
            if value is not None and hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.id)
        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 행을 추가하고 DB 기본값(id, 생성 일시)을 채워 반환합니다.

        Insert a row and return it with server-assigned values (id,
        created_at / date_of_add) populated.
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: Any,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """주어진 필드만 수정합니다. 없으면 None.

        Partially update a row: only keys present in ``update_data`` are
        written (e.g. an album's description, or a photo's album_id when it
        moves). Ownership is checked by the service before this is called.

        Returns:
            ModelType | None: 수정된 레코드, 없으면 None (Updated row, or None when absent)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: Any,
    ) -> bool:
        """행과 하위 엔티티를 삭제합니다. 없으면 False.

        Delete a row. Child rows go with it through the ORM cascade, so
        deleting an album removes its photos with their likes, comments and
        replies.

        Returns:
            bool: 삭제 여부 (False when nothing matched; the table is untouched)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """등호 필터에 맞는 행이 있는지 확인합니다 (예: 사용자명 중복)."""
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
