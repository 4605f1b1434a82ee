# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the user records service, connects the database, the
# photo store and the business logic together, and makes sure everything is ready for requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-owned persistence and service wiring,
# middleware setup, router registration, static photo serving and uniform exception handlers.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.shared.infrastructure.storage.file_manager
# - app.modules.user_management (repository implementation, domain services)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application with test settings)

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.middleware.logging import REQUEST_ID_HEADER, RequestLoggingMiddleware
from app.api.v1.router import api_v1_router
from app.modules.user_management.domain.services.asset_intake import AssetIntake
from app.modules.user_management.domain.services.user_service import UserRecordService
from app.modules.user_management.infrastructure.database import models  # noqa: F401  registers tables
from app.modules.user_management.infrastructure.database.user_repository_impl import SQLAlchemyUserRepository
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import UserServiceException, is_server_error
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.infrastructure.storage.file_manager import FileManager
from app.shared.utils.logging import get_logger, log_shutdown_event, log_startup_event, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Builds the engine, session factory, repository, file store and service at
    startup and stores them on ``app.state``; disposes the engine at shutdown.
    """
    settings: Settings = app.state.settings
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    db_manager = DatabaseConnectionManager(settings=settings)
    try:
        await db_manager.initialize()
        logger.info("✅ Database connection initialized")

        if settings.AUTO_CREATE_TABLES:
            await db_manager.create_all()
            logger.info("✅ Database tables ensured")

        session_manager = DatabaseSessionManager(db_manager)
        session_manager.initialize()

        file_manager = FileManager(settings=settings)
        file_manager.initialize()

        app.state.db_manager = db_manager
        app.state.session_manager = session_manager
        app.state.file_manager = file_manager
        app.state.user_service = UserRecordService(
            repository=SQLAlchemyUserRepository(session_manager),
            asset_intake=AssetIntake(file_manager),
        )
        logger.info("✅ User records service ready")

        yield  # Application is running

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        await db_manager.close()
        app.state.user_service = None
        log_shutdown_event(settings.APP_NAME)


def _error_body(
    request: Request,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", None),
        }
    }


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to run with; the cached environment settings when omitted

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # Stored photos; the directory is created during startup
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(UserServiceException)
    async def user_service_exception_handler(
        request: Request,
        exc: UserServiceException
    ) -> JSONResponse:
        """Render domain exceptions with their own status code."""
        if is_server_error(exc):
            logger.error(f"{exc.error_code}: {exc.message}", error_code=exc.error_code)
        else:
            logger.warning(f"{exc.error_code}: {exc.message}", error_code=exc.error_code)

        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(request, exc.error_code, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                request,
                "VALIDATION_ERROR",
                "Request validation failed",
                {"errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
                    for err in exc.errors()
                ]},
            ),
        )

    @app.exception_handler(Exception)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors without leaking internals."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request,
                "INTERNAL_SERVER_ERROR",
                "An internal server error occurred",
                {"error_type": type(exc).__name__, "error": str(exc)} if settings.DEBUG else {},
            ),
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs",
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used by ``python -m app.main`` and the ``user-records-api`` script.
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
