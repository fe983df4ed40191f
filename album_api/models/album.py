"""앨범 SQLAlchemy ORM 모델 정의.

Album SQLAlchemy ORM model definition.

Tables:
    - albums: 사용자 소유 사진 모음 (Named photo collections owned by a user)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from album_api.database import Base


class Album(Base):
    """앨범 모델 — 한 사용자가 소유한 사진 모음.

    Album model — A named collection of photos owned by exactly one user.

    Attributes:
        id: 정수 식별자 (Integer identifier)
        name: 앨범 이름 (Album name)
        description: 설명 (Description, optional)
        user_id: 소유자 FK (Owner foreign key)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        user: 소유자 (Owner)
        photos: 앨범 사진 목록 (Photos, cascade delete)
    """

    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 소유자 FK — Owner (CASCADE: 사용자 삭제 시 앨범도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="albums")
    photos = relationship("Photo", back_populates="album", cascade="all, delete-orphan", order_by="Photo.id")
