"""사용자 라우터 — 사용자 및 소유 앨범/사진 조회.

User Router — Read-only endpoints for users and the albums/photos they own.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.database import get_db
from album_api.schemas.album import AlbumResponse
from album_api.schemas.photo import PhotoResponse
from album_api.schemas.user import UserResponse
from album_api.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[UserResponse]:
    """사용자 목록을 조회합니다.

    List all users.
    """
    return await user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserResponse:
    """사용자를 조회합니다. 없으면 404.

    Retrieve a user by id.
    """
    return await user_service.get_user(db, user_id)


@router.get("/{user_id}/albums", response_model=list[AlbumResponse])
async def get_user_albums(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AlbumResponse]:
    """사용자의 앨범 목록을 조회합니다."""
    return await user_service.get_user_albums(db, user_id)


@router.get("/{user_id}/photos", response_model=list[PhotoResponse])
async def get_user_photos(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PhotoResponse]:
    """사용자의 사진 목록을 조회합니다."""
    return await user_service.get_user_photos(db, user_id)
