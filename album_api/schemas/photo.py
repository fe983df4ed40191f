"""사진/좋아요/댓글/답글 Pydantic 요청/응답 스키마 정의.

Photo, like, comment and reply request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field


# === 사진 (Photo) 스키마 ===

class PhotoCreate(BaseModel):
    """사진 등록 요청 스키마.

    Photo creation request schema.
    album_id must reference an album owned by the caller.

    Attributes:
        album_id: 대상 앨범 ID (Target album id)
        description: 설명 (Description, optional)
        image_url: 이미지 위치 (Image location, optional)
    """

    album_id: int
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)


class PhotoUpdate(BaseModel):
    """사진 수정 요청 스키마 (부분 업데이트).

    Photo update request schema (partial update).
    Setting album_id moves the photo into another album owned by the caller.
    """

    album_id: int | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)


class PhotoResponse(BaseModel):
    """사진 응답 스키마."""

    id: int
    album_id: int
    user_id: str
    description: str | None = None
    image_url: str | None = None
    number_of_likes: int
    date_of_add: datetime


# === 좋아요/댓글/답글 (Like/Comment/Reply) 스키마 ===

class LikeResponse(BaseModel):
    """좋아요 응답 스키마."""

    id: int
    user_id: str


class ReplyCreate(BaseModel):
    """답글 작성 요청 스키마."""

    content: str = Field(min_length=1)


class ReplyResponse(BaseModel):
    """답글 응답 스키마."""

    id: int
    comment_id: int
    user_id: str
    content: str
    created_at: datetime


class CommentCreate(BaseModel):
    """댓글 작성 요청 스키마."""

    content: str = Field(min_length=1)


class CommentResponse(BaseModel):
    """댓글 응답 스키마 — 답글 스레드 포함.

    Comment response schema including its reply thread.
    """

    id: int
    photo_id: int
    user_id: str
    content: str
    created_at: datetime
    replies: list[ReplyResponse] = []


class PhotoDetailResponse(PhotoResponse):
    """사진 상세 응답 스키마 — 좋아요와 댓글 포함.

    Photo detail response schema with likes and threaded comments.
    """

    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []
