"""사진 서비스 — 사진 CRUD, 좋아요/취소, 댓글/답글 비즈니스 로직.

Photo Service — Business logic for photo CRUD, likes and threaded comments.

Every mutation follows the same sequence:
    1. 사진 조회 (fetch the photo with its collections)
    2. 없으면 404 (NotFoundError when absent)
    3. 소유/중복 여부 확인 (ownership or already-performed check)
    4. 메모리 컬렉션 변경 (mutate the in-memory collection)
    5. 레포지토리로 저장 (persist through the repository)

number_of_likes is recomputed from the likes collection on every
like/unlike, so it always equals len(photo.likes).
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.album import Album
from album_api.models.photo import Comment, Like, Photo, Reply
from album_api.repositories.album_repository import album_repository
from album_api.repositories.photo_repository import photo_repository
from album_api.schemas.photo import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PhotoCreate,
    PhotoDetailResponse,
    PhotoResponse,
    PhotoUpdate,
    ReplyCreate,
    ReplyResponse,
)
from album_api.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


def photo_to_response(photo: Photo) -> PhotoResponse:
    """사진 모델을 응답 스키마로 변환합니다 (컬렉션 제외).

    Convert a Photo model instance to a PhotoResponse (no collections).
    """
    return PhotoResponse(
        id=photo.id,
        album_id=photo.album_id,
        user_id=str(photo.user_id),
        description=photo.description,
        image_url=photo.image_url,
        number_of_likes=photo.number_of_likes,
        date_of_add=photo.date_of_add,
    )


def reply_to_response(reply: Reply) -> ReplyResponse:
    return ReplyResponse(
        id=reply.id,
        comment_id=reply.comment_id,
        user_id=str(reply.user_id),
        content=reply.content,
        created_at=reply.created_at,
    )


def comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        photo_id=comment.photo_id,
        user_id=str(comment.user_id),
        content=comment.content,
        created_at=comment.created_at,
        replies=[reply_to_response(r) for r in comment.replies],
    )


def photo_to_detail_response(photo: Photo) -> PhotoDetailResponse:
    """컬렉션이 로드된 사진을 상세 응답으로 변환합니다.

    Convert a photo loaded via get_detail into a PhotoDetailResponse.
    """
    return PhotoDetailResponse(
        **photo_to_response(photo).model_dump(),
        likes=[LikeResponse(id=like.id, user_id=str(like.user_id)) for like in photo.likes],
        comments=[comment_to_response(c) for c in photo.comments],
    )


class PhotoService:
    """사진 관련 비즈니스 로직을 처리하는 서비스.

    Service handling photo business logic: CRUD with ownership checks,
    like/unlike, and comment/reply threads.
    """

    async def _get_detail_or_404(self, db: AsyncSession, photo_id: int) -> Photo:
        photo: Photo | None = await photo_repository.get_detail(db, photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")
        return photo

    async def _get_owned(self, db: AsyncSession, photo_id: int, user_id: UUID) -> Photo:
        """호출자 소유의 사진을 조회합니다. 없거나 타인 소유면 404.

        Fetch a photo owned by the caller.

        Raises:
            NotFoundError: 사진이 없거나 호출자 소유가 아닐 때
                           (Photo absent or owned by another user)
        """
        photo: Photo | None = await photo_repository.get_by_id(db, photo_id)
        if photo is None or photo.user_id != user_id:
            raise NotFoundError("Photo not found")
        return photo

    async def _get_owned_album(self, db: AsyncSession, album_id: int, user_id: UUID) -> Album:
        album: Album | None = await album_repository.get_by_id(db, album_id)
        if album is None or album.user_id != user_id:
            raise NotFoundError("Album not found")
        return album

    # ------------------------------------------------------------------
    # 조회 — Queries
    # ------------------------------------------------------------------

    async def list_photos(self, db: AsyncSession) -> list[PhotoResponse]:
        """전체 사진 목록을 조회합니다.

        List all photos.
        """
        photos: list[Photo] = await photo_repository.get_photos(db)
        return [photo_to_response(p) for p in photos]

    async def get_photo(self, db: AsyncSession, photo_id: int) -> PhotoDetailResponse:
        """사진 상세(좋아요/댓글 포함)를 조회합니다.

        Retrieve a photo with likes and threaded comments.

        Raises:
            NotFoundError: 사진을 찾을 수 없을 때 (Photo not found)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        return photo_to_detail_response(photo)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create_photo(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: PhotoCreate,
    ) -> PhotoResponse:
        """호출자 소유 앨범에 사진을 등록합니다.

        Add a photo to an album owned by the caller.

        Raises:
            NotFoundError: 앨범이 없거나 호출자 소유가 아닐 때
                           (Album absent or not owned by the caller)
        """
        album: Album = await self._get_owned_album(db, data.album_id, user_id)
        photo: Photo = await photo_repository.create(
            db,
            {
                "album_id": album.id,
                "user_id": album.user_id,
                "description": data.description,
                "image_url": data.image_url,
                "number_of_likes": 0,
            },
        )
        logger.info("Photo %s added to album %s", photo.id, album.id)
        return photo_to_response(photo)

    async def update_photo(
        self,
        db: AsyncSession,
        photo_id: int,
        user_id: UUID,
        data: PhotoUpdate,
    ) -> PhotoResponse:
        """사진 정보를 수정합니다. 소유자만 가능.

        Update a photo. Only the owner may update it; moving the photo to
        another album requires owning that album as well.

        Raises:
            NotFoundError: 사진/대상 앨범이 없거나 호출자 소유가 아닐 때
                           (Photo or target album absent or not owned)
        """
        await self._get_owned(db, photo_id, user_id)

        update_data: dict = data.model_dump(exclude_unset=True)
        if update_data.get("album_id") is None:
            update_data.pop("album_id", None)
        else:
            await self._get_owned_album(db, update_data["album_id"], user_id)

        photo: Photo | None = await photo_repository.update(db, photo_id, update_data)
        if photo is None:
            raise NotFoundError("Photo not found")
        return photo_to_response(photo)

    async def delete_photo(
        self,
        db: AsyncSession,
        photo_id: int,
        user_id: UUID,
    ) -> None:
        """사진을 삭제합니다. 소유자만 가능.

        Delete a photo with its likes and comments. Another user's photo is
        never deleted.

        Raises:
            NotFoundError: 사진이 없거나 호출자 소유가 아닐 때
                           (Photo absent or not owned by the caller)
        """
        await self._get_owned(db, photo_id, user_id)
        await photo_repository.delete(db, photo_id)
        logger.info("Photo %s deleted by user %s", photo_id, user_id)

    # ------------------------------------------------------------------
    # 좋아요 — Likes
    # ------------------------------------------------------------------

    async def like_photo(
        self,
        db: AsyncSession,
        photo_id: int,
        user_id: UUID,
    ) -> PhotoDetailResponse:
        """사진에 좋아요를 추가합니다.

        Like a photo on behalf of the caller.

        Raises:
            NotFoundError: 사진을 찾을 수 없을 때 (Photo not found)
            BadRequestError: 이미 좋아요한 사진일 때 (Already liked by the caller)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        if any(like.user_id == user_id for like in photo.likes):
            raise BadRequestError("Photo already liked")

        photo.likes.append(Like(user_id=user_id))
        photo.number_of_likes = len(photo.likes)

        # 동시 요청은 uq_like_photo_user 제약에서 걸림 — a concurrent like trips the unique constraint
        try:
            photo = await photo_repository.update_photo(db, photo)
        except IntegrityError:
            await db.rollback()
            logger.warning("Duplicate like by user %s on photo %s rejected", user_id, photo_id)
            raise BadRequestError("Photo already liked")
        logger.info("User %s liked photo %s", user_id, photo_id)
        return photo_to_detail_response(photo)

    async def unlike_photo(
        self,
        db: AsyncSession,
        photo_id: int,
        user_id: UUID,
    ) -> PhotoDetailResponse:
        """사진 좋아요를 취소합니다.

        Remove the caller's like from a photo.

        Raises:
            NotFoundError: 사진을 찾을 수 없을 때 (Photo not found)
            BadRequestError: 좋아요하지 않은 사진일 때 (Caller has not liked it)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        like: Like | None = next((lk for lk in photo.likes if lk.user_id == user_id), None)
        if like is None:
            raise BadRequestError("Photo not liked")

        # 컬렉션에서 제거 시 delete-orphan으로 삭제됨 — removed like is deleted as an orphan
        photo.likes.remove(like)
        photo.number_of_likes = len(photo.likes)

        photo = await photo_repository.update_photo(db, photo)
        logger.info("User %s unliked photo %s", user_id, photo_id)
        return photo_to_detail_response(photo)

    # ------------------------------------------------------------------
    # 댓글/답글 — Comments and replies
    # ------------------------------------------------------------------

    async def add_comment(
        self,
        db: AsyncSession,
        photo_id: int,
        user_id: UUID,
        data: CommentCreate,
    ) -> CommentResponse:
        """사진에 댓글을 추가합니다.

        Add a comment authored by the caller to a photo.

        Raises:
            NotFoundError: 사진을 찾을 수 없을 때 (Photo not found)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        comment = Comment(content=data.content, user_id=user_id, replies=[])

        updated: Photo | None = await photo_repository.update_comments(
            db, photo.id, [*photo.comments, comment]
        )
        if updated is None:
            raise NotFoundError("Photo not found")
        logger.info("User %s commented on photo %s", user_id, photo_id)
        return comment_to_response(comment)

    async def remove_comment(
        self,
        db: AsyncSession,
        photo_id: int,
        comment_id: int,
        user_id: UUID,
    ) -> None:
        """사진에서 댓글(및 답글)을 삭제합니다. 작성자만 가능.

        Remove a comment and its replies from a photo. Only the author may
        remove it.

        Raises:
            NotFoundError: 사진이 없거나, 댓글이 그 사진에 없거나,
                           호출자가 작성자가 아닐 때
                           (Photo absent, comment not on the photo, or not the author)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        comment: Comment | None = next((c for c in photo.comments if c.id == comment_id), None)
        if comment is None or comment.user_id != user_id:
            raise NotFoundError("Comment not found")

        remaining: list[Comment] = [c for c in photo.comments if c.id != comment_id]
        await photo_repository.update_comments(db, photo.id, remaining)
        logger.info("User %s removed comment %s from photo %s", user_id, comment_id, photo_id)

    async def add_reply(
        self,
        db: AsyncSession,
        photo_id: int,
        comment_id: int,
        user_id: UUID,
        data: ReplyCreate,
    ) -> ReplyResponse:
        """댓글에 답글을 추가합니다.

        Add a reply authored by the caller under a comment of the photo.

        Raises:
            NotFoundError: 사진이 없거나 댓글이 그 사진에 없을 때
                           (Photo absent or comment not on the photo)
        """
        photo: Photo = await self._get_detail_or_404(db, photo_id)
        comment: Comment | None = next((c for c in photo.comments if c.id == comment_id), None)
        if comment is None:
            raise NotFoundError("Comment not found")

        reply = Reply(content=data.content, user_id=user_id)
        comment.replies.append(reply)

        await photo_repository.update_photo(db, photo)
        return reply_to_response(reply)


# 싱글턴 인스턴스 — Singleton instance
photo_service: PhotoService = PhotoService()
