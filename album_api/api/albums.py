"""앨범 라우터 — 앨범 CRUD 엔드포인트.

Album Router — CRUD endpoints for albums.

Permission Matrix:
    - 목록/상세/사진 조회: 누구나 (anyone)
    - 생성: 로그인 사용자 (any authenticated user, becomes the owner)
    - 수정/삭제: 소유자만, 타인 앨범은 404 (owner only; others get 404)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from album_api.api.deps import get_current_user
from album_api.database import get_db
from album_api.models.user import User
from album_api.schemas.album import AlbumCreate, AlbumResponse, AlbumUpdate
from album_api.schemas.photo import PhotoResponse
from album_api.services.album_service import album_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[AlbumResponse])
async def list_albums(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AlbumResponse]:
    """앨범 목록을 조회합니다.

    List all albums.
    """
    return await album_service.list_albums(db)


@router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(
    album_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AlbumResponse:
    """앨범을 조회합니다. 없으면 404.

    Retrieve an album by id.
    """
    return await album_service.get_album(db, album_id)


@router.get("/{album_id}/photos", response_model=list[PhotoResponse])
async def get_album_photos(
    album_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PhotoResponse]:
    """앨범의 사진 목록을 조회합니다.

    List the photos in an album.
    """
    return await album_service.get_album_photos(db, album_id)


@router.post("", response_model=AlbumResponse, status_code=201)
async def create_album(
    data: AlbumCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> AlbumResponse:
    """새 앨범을 생성합니다. 호출자가 소유자가 됩니다.

    Create an album owned by the current user.
    """
    result: AlbumResponse = await album_service.create_album(db, current_user.id, data)
    await db.commit()
    return result


@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(
    album_id: int,
    data: AlbumUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> AlbumResponse:
    """앨범을 수정합니다. 소유자만 가능.

    Update an album owned by the current user.
    """
    result: AlbumResponse = await album_service.update_album(db, album_id, current_user.id, data)
    await db.commit()
    return result


@router.delete("/{album_id}", status_code=204)
async def delete_album(
    album_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """앨범과 소속 사진을 삭제합니다. 소유자만 가능.

    Delete an album owned by the current user.
    """
    await album_service.delete_album(db, album_id, current_user.id)
    await db.commit()
