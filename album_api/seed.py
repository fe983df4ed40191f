"""초기 데이터 시드 스크립트 — 데모 사용자, 앨범, 사진 생성.

Seed script — Creates a demo user with one album and one photo.
Run this script once to bootstrap a local database.

Usage:
    python -m album_api.seed

Creates:
    - 1개 사용자: demo / demo1234 (1 user)
    - 1개 앨범: "Holidays" (1 album)
    - 1개 사진 (1 photo, no likes)
"""

import asyncio

from sqlalchemy import select

from album_api.database import async_session, engine, Base
from album_api.models import Album, Photo, User
from album_api.utils.password import hash_password


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with demo data.
    Creates tables if they don't exist, then inserts the demo user,
    album and photo.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(User).where(User.username == "demo"))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        user: User = User(
            username="demo",
            email="demo@example.com",
            password_hash=hash_password("demo1234"),
        )
        db.add(user)
        await db.flush()  # flush로 user.id 생성 (Flush to generate user.id)

        album: Album = Album(name="Holidays", description="Summer trip", user_id=user.id)
        db.add(album)
        await db.flush()

        # 사진 소유자는 앨범 소유자와 동일 — Photo owner matches the album owner
        photo: Photo = Photo(
            album_id=album.id,
            user_id=user.id,
            description="Sunset at the beach",
            image_url="https://example.com/images/sunset.jpg",
            number_of_likes=0,
        )
        db.add(photo)

        await db.commit()
        print(f"Seeded: user=demo/demo1234, album={album.id}, photo={photo.id}")


if __name__ == "__main__":
    asyncio.run(seed())
