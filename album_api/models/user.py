"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.

Tables:
    - users: 사용자 계정 (User accounts; own albums, photos, likes, comments)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from album_api.database import Base


class User(Base):
    """사용자 모델 — 앨범/사진/좋아요/댓글의 소유자.

    User model — Owner of albums, photos, likes, comments and replies.
    Username is globally unique and doubles as the login name.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 로그인 아이디 (Login username, unique)
        email: 이메일 (Email address, optional)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        albums, photos, likes, comments, replies: 소유 엔티티 (Owned entities)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (삭제 전파는 FK ondelete=CASCADE 담당, DB-level cascade)
    albums = relationship("Album", back_populates="user")
    photos = relationship("Photo", back_populates="user")
    likes = relationship("Like", back_populates="user")
    comments = relationship("Comment", back_populates="user")
    replies = relationship("Reply", back_populates="user")
