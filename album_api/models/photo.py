"""사진 및 반응(좋아요/댓글/답글) SQLAlchemy ORM 모델 정의.

Photo and reaction SQLAlchemy ORM model definitions.

Tables:
    - photos: 앨범 내 사진 (Photos inside an album)
    - likes: 사용자별 사진 좋아요 (One like per user per photo)
    - comments: 사진 댓글 (Comments on a photo)
    - replies: 댓글 답글 (Replies threaded under a comment)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from album_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Photo(Base):
    """사진 모델 — 좋아요와 댓글을 가지는 이미지 레코드.

    Photo model — An image record inside an album, with likes and comments.
    number_of_likes is a denormalized count kept equal to len(likes)
    by PhotoService after every like/unlike.

    Attributes:
        id: 정수 식별자 (Integer identifier)
        description: 설명 (Description, optional)
        image_url: 이미지 위치 (Image location, optional)
        album_id: 소속 앨범 FK (Parent album foreign key)
        user_id: 소유자 FK — 앨범 소유자와 동일 (Owner, same as album owner)
        number_of_likes: 좋아요 수 (Like count)
        date_of_add: 등록 일시 UTC (Upload timestamp)
    """

    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    album_id: Mapped[int] = mapped_column(Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    number_of_likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    date_of_add: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    album = relationship("Album", back_populates="photos")
    user = relationship("User", back_populates="photos")
    likes = relationship("Like", back_populates="photo", cascade="all, delete-orphan", order_by="Like.id")
    comments = relationship("Comment", back_populates="photo", cascade="all, delete-orphan", order_by="Comment.id")


class Like(Base):
    """좋아요 모델 — 한 사용자의 사진 추천.

    Like model — A single user's endorsement of a photo.

    Constraints:
        uq_like_photo_user: 사진당 사용자 1회 (One like per user per photo)
    """

    __tablename__ = "likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    photo_id: Mapped[int] = mapped_column(Integer, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        UniqueConstraint("photo_id", "user_id", name="uq_like_photo_user"),
    )

    photo = relationship("Photo", back_populates="likes")
    user = relationship("User", back_populates="likes")


class Comment(Base):
    """댓글 모델 — 사진에 대한 텍스트 피드백.

    Comment model — Textual feedback on a photo, owning a thread of replies.
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    photo_id: Mapped[int] = mapped_column(Integer, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    photo = relationship("Photo", back_populates="comments")
    user = relationship("User", back_populates="comments")
    replies = relationship("Reply", back_populates="comment", cascade="all, delete-orphan", order_by="Reply.id")


class Reply(Base):
    """답글 모델 — 댓글 아래 스레드 응답."""

    __tablename__ = "replies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    comment_id: Mapped[int] = mapped_column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    comment = relationship("Comment", back_populates="replies")
    user = relationship("User", back_populates="replies")
