"""사진 서비스 테스트 — 좋아요/취소, 댓글/답글, 소유권 검사.

Photo service tests.
Part 1 mocks the photo repository to check which persistence calls each
operation makes; part 2 runs the same operations against a real session.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.album import Album
from album_api.models.photo import Comment, Like, Photo
from album_api.repositories.photo_repository import photo_repository
from album_api.schemas.photo import CommentCreate, PhotoCreate, PhotoUpdate, ReplyCreate
from album_api.services.photo_service import photo_service
from album_api.utils.exceptions import BadRequestError, NotFoundError

REPO = "album_api.services.photo_service.photo_repository"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_photo(likes: list[Like] | None = None, comments: list[Comment] | None = None) -> Photo:
    """Build a transient photo with its collections already populated."""
    return Photo(
        id=1,
        album_id=1,
        user_id=uuid.uuid4(),
        description="Sunset",
        image_url=None,
        number_of_likes=len(likes or []),
        date_of_add=datetime.now(timezone.utc),
        likes=likes or [],
        comments=comments or [],
    )


async def _assign_like_ids(db, photo: Photo) -> Photo:
    for i, like in enumerate(photo.likes, start=1):
        like.id = i
    return photo


def make_mock_repo(photo: Photo | None) -> MagicMock:
    """Create a mocked photo repository returning ``photo`` from get_detail."""
    repo = MagicMock()
    repo.get_detail = AsyncMock(return_value=photo)
    repo.update_photo = AsyncMock(side_effect=_assign_like_ids)
    repo.update_comments = AsyncMock(return_value=photo)
    return repo


# ---------------------------------------------------------------------------
# 1. Mock 레포지토리 테스트
# ---------------------------------------------------------------------------

class TestLikeWithMockRepository:
    """좋아요/취소가 레포지토리를 올바르게 호출하는지 검증."""

    async def test_like_persists_once(self):
        """좋아요 시 update_photo 1회 호출, 좋아요 수 1."""
        photo = make_photo()
        repo = make_mock_repo(photo)
        user_id = uuid.uuid4()

        with patch(REPO, repo):
            result = await photo_service.like_photo(AsyncMock(), photo.id, user_id)

        repo.update_photo.assert_awaited_once()
        assert result.number_of_likes == 1
        assert [lk.user_id for lk in result.likes] == [str(user_id)]

    async def test_like_twice_rejected(self):
        """이미 좋아요한 사진은 400, 저장하지 않음."""
        user_id = uuid.uuid4()
        photo = make_photo(likes=[Like(id=1, user_id=user_id)])
        repo = make_mock_repo(photo)

        with patch(REPO, repo):
            with pytest.raises(BadRequestError):
                await photo_service.like_photo(AsyncMock(), photo.id, user_id)

        repo.update_photo.assert_not_awaited()
        assert photo.number_of_likes == 1

    async def test_like_missing_photo(self):
        """사진이 없으면 404, 저장하지 않음."""
        repo = make_mock_repo(None)

        with patch(REPO, repo):
            with pytest.raises(NotFoundError):
                await photo_service.like_photo(AsyncMock(), 1, uuid.uuid4())

        repo.update_photo.assert_not_awaited()

    async def test_unlike_persists_once(self):
        """좋아요 취소 시 update_photo 1회 호출, 좋아요 수 0."""
        user_id = uuid.uuid4()
        photo = make_photo(likes=[Like(id=1, user_id=user_id)])
        repo = make_mock_repo(photo)

        with patch(REPO, repo):
            result = await photo_service.unlike_photo(AsyncMock(), photo.id, user_id)

        repo.update_photo.assert_awaited_once()
        assert result.number_of_likes == 0
        assert result.likes == []

    async def test_unlike_not_liked_rejected(self):
        """좋아요하지 않은 사진 취소는 400."""
        photo = make_photo(likes=[Like(id=1, user_id=uuid.uuid4())])
        repo = make_mock_repo(photo)

        with patch(REPO, repo):
            with pytest.raises(BadRequestError):
                await photo_service.unlike_photo(AsyncMock(), photo.id, uuid.uuid4())

        repo.update_photo.assert_not_awaited()

    async def test_like_unique_constraint_violation(self):
        """동시 좋아요로 제약 위반 시 400, 롤백."""
        photo = make_photo()
        repo = make_mock_repo(photo)
        repo.update_photo = AsyncMock(
            side_effect=IntegrityError("INSERT INTO likes", {}, Exception("UNIQUE constraint failed")),
        )
        db = AsyncMock()

        with patch(REPO, repo):
            with pytest.raises(BadRequestError):
                await photo_service.like_photo(db, photo.id, uuid.uuid4())

        db.rollback.assert_awaited_once()


class TestCommentWithMockRepository:
    """댓글 작업이 레포지토리를 올바르게 호출하는지 검증."""

    async def test_add_comment_appends_to_collection(self):
        """기존 댓글 뒤에 새 댓글을 붙여 저장."""
        existing = Comment(id=5, content="old", user_id=uuid.uuid4(), replies=[])
        photo = make_photo(comments=[existing])
        repo = make_mock_repo(photo)

        async def _persist(db, photo_id, comments):
            new = comments[-1]
            new.id, new.photo_id, new.created_at = 6, photo_id, datetime.now(timezone.utc)
            return photo

        repo.update_comments = AsyncMock(side_effect=_persist)
        user_id = uuid.uuid4()

        with patch(REPO, repo):
            result = await photo_service.add_comment(
                AsyncMock(), photo.id, user_id, CommentCreate(content="hello"),
            )

        repo.update_comments.assert_awaited_once()
        _, photo_id, comments = repo.update_comments.await_args.args
        assert photo_id == photo.id
        assert [c.content for c in comments] == ["old", "hello"]
        assert result.id == 6
        assert result.user_id == str(user_id)

    async def test_add_comment_missing_photo(self):
        """사진이 없으면 404, 저장하지 않음."""
        repo = make_mock_repo(None)

        with patch(REPO, repo):
            with pytest.raises(NotFoundError):
                await photo_service.add_comment(AsyncMock(), 1, uuid.uuid4(), CommentCreate(content="x"))

        repo.update_comments.assert_not_awaited()

    async def test_remove_comment_not_on_photo(self):
        """사진에 없는 댓글 삭제는 404."""
        photo = make_photo(comments=[Comment(id=5, content="old", user_id=uuid.uuid4(), replies=[])])
        repo = make_mock_repo(photo)

        with patch(REPO, repo):
            with pytest.raises(NotFoundError):
                await photo_service.remove_comment(AsyncMock(), photo.id, 99, uuid.uuid4())

        repo.update_comments.assert_not_awaited()

    async def test_add_reply_missing_comment(self):
        """없는 댓글에 답글은 404."""
        repo = make_mock_repo(make_photo())

        with patch(REPO, repo):
            with pytest.raises(NotFoundError):
                await photo_service.add_reply(AsyncMock(), 1, 99, uuid.uuid4(), ReplyCreate(content="x"))

        repo.update_photo.assert_not_awaited()


# ---------------------------------------------------------------------------
# 2. 실제 세션 테스트
# ---------------------------------------------------------------------------

class TestPhotoCrud:
    """사진 등록/수정/삭제 소유권 테스트."""

    async def test_create_photo_in_own_album(self, db: AsyncSession, album, owner):
        """소유 앨범에 등록, 좋아요 0."""
        result = await photo_service.create_photo(
            db, owner.id, PhotoCreate(album_id=album.id, description="New"),
        )
        assert result.album_id == album.id
        assert result.user_id == str(owner.id)
        assert result.number_of_likes == 0

    async def test_create_photo_in_foreign_album(self, db: AsyncSession, album, other_user):
        """타인 앨범에 등록 시 404."""
        with pytest.raises(NotFoundError):
            await photo_service.create_photo(db, other_user.id, PhotoCreate(album_id=album.id))

    async def test_update_photo_by_other_user(self, db: AsyncSession, photo, other_user):
        """타인 사진 수정 시 404, 변경 없음."""
        with pytest.raises(NotFoundError):
            await photo_service.update_photo(
                db, photo.id, other_user.id, PhotoUpdate(description="Hijacked"),
            )
        stored = await photo_repository.get_by_id(db, photo.id)
        assert stored.description == "Sunset"

    async def test_update_photo_by_owner(self, db: AsyncSession, photo, owner):
        """소유자 수정 성공."""
        result = await photo_service.update_photo(
            db, photo.id, owner.id, PhotoUpdate(description="Sunrise"),
        )
        assert result.description == "Sunrise"

    async def test_move_photo_to_foreign_album(self, db: AsyncSession, photo, owner, other_user):
        """타인 앨범으로 이동 시 404, album_id 유지."""
        foreign = Album(name="Theirs", user_id=other_user.id)
        db.add(foreign)
        await db.flush()

        with pytest.raises(NotFoundError):
            await photo_service.update_photo(db, photo.id, owner.id, PhotoUpdate(album_id=foreign.id))
        stored = await photo_repository.get_by_id(db, photo.id)
        assert stored.album_id != foreign.id

    async def test_move_photo_to_own_album(self, db: AsyncSession, photo, owner):
        """소유한 다른 앨범으로 이동 성공."""
        second = Album(name="Archive", user_id=owner.id)
        db.add(second)
        await db.flush()

        result = await photo_service.update_photo(db, photo.id, owner.id, PhotoUpdate(album_id=second.id))
        assert result.album_id == second.id

    async def test_delete_photo_by_other_user(self, db: AsyncSession, photo, other_user):
        """타인 사진 삭제는 수행되지 않음."""
        with pytest.raises(NotFoundError):
            await photo_service.delete_photo(db, photo.id, other_user.id)
        assert await photo_repository.get_by_id(db, photo.id) is not None

    async def test_delete_photo_by_owner(self, db: AsyncSession, photo, owner):
        """소유자 삭제 성공."""
        await photo_service.delete_photo(db, photo.id, owner.id)
        assert await photo_repository.get_by_id(db, photo.id) is None


class TestLikesAndComments:
    """좋아요 수와 댓글 스레드 통합 테스트."""

    async def test_like_count_tracks_likes(self, db: AsyncSession, photo, owner, other_user):
        """좋아요 수는 항상 좋아요 목록 길이와 같음."""
        result = await photo_service.like_photo(db, photo.id, owner.id)
        assert result.number_of_likes == len(result.likes) == 1

        result = await photo_service.like_photo(db, photo.id, other_user.id)
        assert result.number_of_likes == len(result.likes) == 2

        result = await photo_service.unlike_photo(db, photo.id, owner.id)
        assert result.number_of_likes == len(result.likes) == 1
        assert [lk.user_id for lk in result.likes] == [str(other_user.id)]

    async def test_unlike_twice_rejected(self, db: AsyncSession, photo, owner):
        """두 번째 좋아요 취소는 400."""
        await photo_service.like_photo(db, photo.id, owner.id)
        await photo_service.unlike_photo(db, photo.id, owner.id)
        with pytest.raises(BadRequestError):
            await photo_service.unlike_photo(db, photo.id, owner.id)

    async def test_comment_reply_and_remove(self, db: AsyncSession, photo, owner, other_user):
        """댓글 작성, 답글, 작성자 삭제."""
        comment = await photo_service.add_comment(db, photo.id, other_user.id, CommentCreate(content="Nice"))
        reply = await photo_service.add_reply(db, photo.id, comment.id, owner.id, ReplyCreate(content="Thanks"))
        assert reply.comment_id == comment.id

        detail = await photo_service.get_photo(db, photo.id)
        assert [c.content for c in detail.comments] == ["Nice"]
        assert [r.content for r in detail.comments[0].replies] == ["Thanks"]

        # 작성자가 아니면 삭제 불가 — only the author may remove it
        with pytest.raises(NotFoundError):
            await photo_service.remove_comment(db, photo.id, comment.id, owner.id)

        await photo_service.remove_comment(db, photo.id, comment.id, other_user.id)
        detail = await photo_service.get_photo(db, photo.id)
        assert detail.comments == []

    async def test_get_photo_not_found(self, db: AsyncSession):
        """없는 사진 상세는 404."""
        with pytest.raises(NotFoundError):
            await photo_service.get_photo(db, 9999)
