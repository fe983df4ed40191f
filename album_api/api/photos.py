"""사진 라우터 — 사진 CRUD, 좋아요, 댓글/답글 엔드포인트.

Photo Router — CRUD, like/unlike and comment/reply endpoints for photos.

Permission Matrix:
    - 목록/상세 조회: 누구나 (anyone)
    - 등록/수정/삭제: 앨범 소유자만 (album owner only; others get 404)
    - 좋아요/댓글/답글: 로그인 사용자 (any authenticated user)
    - 댓글 삭제: 댓글 작성자만 (comment author only)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.api.deps import get_current_user
from album_api.database import get_db
from album_api.models.user import User
from album_api.schemas.photo import (
    CommentCreate,
    CommentResponse,
    PhotoCreate,
    PhotoDetailResponse,
    PhotoResponse,
    PhotoUpdate,
    ReplyCreate,
    ReplyResponse,
)
from album_api.services.photo_service import photo_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[PhotoResponse])
async def list_photos(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PhotoResponse]:
    """사진 목록을 조회합니다.

    List all photos.
    """
    return await photo_service.list_photos(db)


@router.get("/{photo_id}", response_model=PhotoDetailResponse)
async def get_photo(
    photo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PhotoDetailResponse:
    """사진 상세(좋아요/댓글 포함)를 조회합니다. 없으면 404.

    Retrieve a photo with likes and comments.
    """
    return await photo_service.get_photo(db, photo_id)


@router.post("", response_model=PhotoResponse, status_code=201)
async def create_photo(
    data: PhotoCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PhotoResponse:
    """호출자 소유 앨범에 사진을 등록합니다.

    Add a photo to one of the current user's albums.
    """
    result: PhotoResponse = await photo_service.create_photo(db, current_user.id, data)
    await db.commit()
    return result


@router.put("/{photo_id}", response_model=PhotoResponse)
async def update_photo(
    photo_id: int,
    data: PhotoUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PhotoResponse:
    """사진을 수정합니다. 소유자만 가능."""
    result: PhotoResponse = await photo_service.update_photo(db, photo_id, current_user.id, data)
    await db.commit()
    return result


@router.delete("/{photo_id}", status_code=204)
async def delete_photo(
    photo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """사진을 삭제합니다. 소유자만 가능."""
    await photo_service.delete_photo(db, photo_id, current_user.id)
    await db.commit()


# ---------------------------------------------------------------------------
# 좋아요 — Likes
# ---------------------------------------------------------------------------

@router.post("/{photo_id}/like", response_model=PhotoDetailResponse)
async def like_photo(
    photo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PhotoDetailResponse:
    """사진에 좋아요. 이미 좋아요했으면 400.

    Like a photo. Returns 400 if the current user already liked it.
    """
    result: PhotoDetailResponse = await photo_service.like_photo(db, photo_id, current_user.id)
    await db.commit()
    return result


@router.post("/{photo_id}/unlike", response_model=PhotoDetailResponse)
async def unlike_photo(
    photo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PhotoDetailResponse:
    """사진 좋아요 취소. 좋아요하지 않았으면 400.

    Remove a like. Returns 400 if the current user has not liked the photo.
    """
    result: PhotoDetailResponse = await photo_service.unlike_photo(db, photo_id, current_user.id)
    await db.commit()
    return result


# ---------------------------------------------------------------------------
# 댓글/답글 — Comments and replies
# ---------------------------------------------------------------------------

@router.post("/{photo_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    photo_id: int,
    data: CommentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> CommentResponse:
    """사진에 댓글을 작성합니다."""
    result: CommentResponse = await photo_service.add_comment(db, photo_id, current_user.id, data)
    await db.commit()
    return result


@router.delete("/{photo_id}/comments/{comment_id}", status_code=204)
async def remove_comment(
    photo_id: int,
    comment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """댓글을 삭제합니다. 작성자만 가능, 답글도 함께 삭제.

    Remove a comment (and its replies). Author only.
    """
    await photo_service.remove_comment(db, photo_id, comment_id, current_user.id)
    await db.commit()


@router.post(
    "/{photo_id}/comments/{comment_id}/replies",
    response_model=ReplyResponse,
    status_code=201,
)
async def add_reply(
    photo_id: int,
    comment_id: int,
    data: ReplyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ReplyResponse:
    """댓글에 답글을 작성합니다."""
    result: ReplyResponse = await photo_service.add_reply(
        db, photo_id, comment_id, current_user.id, data
    )
    await db.commit()
    return result
