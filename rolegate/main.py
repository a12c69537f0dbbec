"""FastAPI application factory. No business logic; only wiring and middleware."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rolegate import __version__
from rolegate.api import router
from rolegate.core.config import Settings, get_settings
from rolegate.services.uploads import ensure_upload_dir
from rolegate.services.user_store import UserStore

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None, user_store: UserStore | None = None) -> FastAPI:
    """
    Build the application.

    settings defaults to get_settings(), which raises if ACCESS_TOKEN_SECRET is
    missing; the app cannot be built without a signing secret.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="rolegate",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.user_store = user_store if user_store is not None else UserStore()

    ensure_upload_dir(settings.UPLOAD_DIR)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(router)

    logger.info(
        "Application ready",
        extra={"environment": settings.APP_ENV, "upload_dir": settings.UPLOAD_DIR},
    )
    return app
