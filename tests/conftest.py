"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh aiosqlite database (StaticPool keeps the single
in-memory connection alive), so no cleanup between tests is needed.
"""

import os

# 앱 임포트 전에 설정 — Must be set before album_api.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from album_api.database import Base, get_db  # noqa: E402
from album_api.main import app  # noqa: E402
from album_api.models import *  # noqa: E402,F401,F403 — register all models with metadata
from album_api.utils.jwt import create_access_token  # noqa: E402
from album_api.utils.password import hash_password  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _make_user(db: AsyncSession, username: str, password: str):
    from album_api.models.user import User
    user = User(
        username=username,
        email=f"{username}@test.com",
        password_hash=hash_password(password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def owner(db: AsyncSession):
    """앨범 소유자 사용자를 생성합니다."""
    return await _make_user(db, "owner", "owner123!")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession):
    """앨범을 소유하지 않은 다른 사용자를 생성합니다."""
    return await _make_user(db, "visitor", "visitor123!")


@pytest_asyncio.fixture
async def album(db: AsyncSession, owner):
    """소유자의 테스트 앨범을 생성합니다."""
    from album_api.models.album import Album
    a = Album(name="Holidays", description="Summer trip", user_id=owner.id)
    db.add(a)
    await db.flush()
    await db.refresh(a)
    return a


@pytest_asyncio.fixture
async def photo(db: AsyncSession, album):
    """테스트 앨범에 사진을 생성합니다 (좋아요 0)."""
    from album_api.models.photo import Photo
    p = Photo(
        album_id=album.id,
        user_id=album.user_id,
        description="Sunset",
        image_url="https://example.com/sunset.jpg",
        number_of_likes=0,
    )
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


def make_token(user) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(user.id),
        "name": user.username,
    })


@pytest.fixture
def owner_token(owner) -> str:
    return make_token(owner)


@pytest.fixture
def other_token(other_user) -> str:
    return make_token(other_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
