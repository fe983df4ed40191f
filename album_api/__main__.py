"""개발 서버 실행 — ``python -m album_api`` 또는 ``album-api``.

Development server launcher. Serves ``album_api.main:app`` with uvicorn;
auto-reload follows the DEBUG setting.
"""

import uvicorn

from album_api.config import settings


def main() -> None:
    uvicorn.run(
        "album_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
