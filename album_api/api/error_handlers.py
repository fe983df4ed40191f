"""전역 예외 핸들러 — 요청 검증 오류를 400으로 변환.

Global exception handlers.
Malformed request bodies or parameters are reported as 400 Bad Request
instead of FastAPI's default 422, keeping the API to two client error kinds
besides auth: NotFound (404) and BadRequest (400).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """FastAPI 앱에 전역 예외 핸들러를 등록합니다.

    Register all global error handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
