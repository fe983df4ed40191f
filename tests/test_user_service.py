"""사용자 서비스 테스트 — 사용자 및 소유 앨범/사진 조회.

User service tests — lookups of users and the content they own.
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.album import Album
from album_api.services.user_service import user_service
from album_api.utils.exceptions import NotFoundError


class TestUserService:
    """사용자 조회 테스트."""

    async def test_list_users(self, db: AsyncSession, owner, other_user):
        """사용자명 순 목록, 비밀번호 미노출."""
        result = await user_service.list_users(db)
        assert [u.username for u in result] == ["owner", "visitor"]
        assert "password_hash" not in result[0].model_dump()

    async def test_get_user(self, db: AsyncSession, owner):
        """사용자 단건 조회."""
        result = await user_service.get_user(db, owner.id)
        assert result.id == str(owner.id)

    async def test_get_user_not_found(self, db: AsyncSession):
        """없는 사용자는 404."""
        with pytest.raises(NotFoundError):
            await user_service.get_user(db, uuid.uuid4())

    async def test_get_user_albums_only_owned(self, db: AsyncSession, album, other_user):
        """소유한 앨범만 반환."""
        db.add(Album(name="Theirs", user_id=other_user.id))
        await db.flush()

        mine = await user_service.get_user_albums(db, album.user_id)
        assert [a.id for a in mine] == [album.id]

        theirs = await user_service.get_user_albums(db, other_user.id)
        assert [a.name for a in theirs] == ["Theirs"]

    async def test_get_user_photos(self, db: AsyncSession, photo, other_user):
        """소유한 사진만 반환."""
        assert [p.id for p in await user_service.get_user_photos(db, photo.user_id)] == [photo.id]
        assert await user_service.get_user_photos(db, other_user.id) == []

    async def test_get_user_albums_unknown_user(self, db: AsyncSession):
        """없는 사용자의 앨범 조회는 404."""
        with pytest.raises(NotFoundError):
            await user_service.get_user_albums(db, uuid.uuid4())
