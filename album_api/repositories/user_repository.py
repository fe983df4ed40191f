"""사용자 레포지토리 — 사용자 조회 쿼리.

User Repository — Lookup queries for user accounts.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.models.user import User
from album_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_users(self, db: AsyncSession) -> list[User]:
        """모든 사용자를 사용자명 순으로 조회합니다.

        Retrieve all users ordered by username.
        """
        query: Select = select(User).order_by(User.username)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_username(self, db: AsyncSession, username: str) -> User | None:
        """사용자명으로 사용자를 조회합니다.

        Retrieve a user by login name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 로그인 아이디 (Login username)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
