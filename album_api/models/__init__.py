"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which relationship resolution and ``create_all`` depend on.

Modules:
    user: 사용자 (User accounts)
    album: 앨범 (Albums)
    photo: 사진, 좋아요, 댓글, 답글 (Photos, likes, comments, replies)
"""

from album_api.models.user import User
from album_api.models.album import Album
from album_api.models.photo import Photo, Like, Comment, Reply

__all__ = [
    "User",
    "Album",
    "Photo", "Like", "Comment", "Reply",
]
