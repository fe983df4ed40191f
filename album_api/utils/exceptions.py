"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly; FastAPI renders them as ``{"detail": ...}``.

Usage:
    from album_api.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Photo not found")
    raise BadRequestError("Photo already liked")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스가 없거나 호출자 소유가 아닐 때 사용.

    404 Not Found exception.
    Raised when a resource does not exist, or when the caller does not own
    the resource it is trying to modify.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 상태 전이 시 사용.

    400 Bad Request exception.
    Raised for invalid state transitions (duplicate like, unlike without a like)
    and for request bodies that fail validation.
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 사용자명 등록 시 사용."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when credentials are wrong or a token is missing, invalid or expired.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
