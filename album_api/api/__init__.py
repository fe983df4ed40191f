"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every resource router into a single
router for inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입/로그인/토큰 갱신/내 정보 (Registration, login, refresh, me)
    - users: 사용자 조회 (User lookups)
    - albums: 앨범 CRUD (Album CRUD)
    - photos: 사진 CRUD, 좋아요, 댓글/답글 (Photo CRUD, likes, comments/replies)
"""

from fastapi import APIRouter

from album_api.api.auth import router as auth_router
from album_api.api.users import router as users_router
from album_api.api.albums import router as albums_router
from album_api.api.photos import router as photos_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(albums_router, prefix="/albums", tags=["Albums"])
api_router.include_router(photos_router, prefix="/photos", tags=["Photos"])
