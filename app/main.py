import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.http.health import router as health_router
from app.api.http.posts import router as posts_router
from app.api.http.search import router as search_router
from app.api.http.categories import router as categories_router
from app.api.http.notes import router as notes_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import ContentError, ValidationFailed
from app.core.logging import configure_logging
from app.db.storage import Storage

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list:
    """Ошибки валидации в виде поле -> сообщение"""
    errors = []
    for error in exc.errors():
        # Первый элемент loc - источник (body, query, path)
        field = ".".join(str(part) for part in error["loc"][1:])
        errors.append({"field": field, "message": error["msg"]})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Все ошибки отдаются клиенту как {"message": ...}"""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation error", "errors": _validation_errors(exc)}
        )

    @app.exception_handler(ContentError)
    async def content_error_handler(request: Request, exc: ContentError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
            return JSONResponse(status_code=exc.status_code, content={"message": "Internal server error"})
        content = {"message": exc.message}
        if isinstance(exc, ValidationFailed):
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"}
        )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None
) -> FastAPI:
    """Сборка приложения; хранилище создается один раз здесь"""
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description="Blog content API: posts, categories, search and margin notes",
        version=settings.app_version
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.storage = storage if storage is not None else Storage.initialize(
        posts_dir=Path(settings.posts_dir),
        extension=settings.posts_extension
    )

    register_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(posts_router)
    app.include_router(search_router)
    app.include_router(categories_router)
    app.include_router(notes_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": settings.app_title,
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
