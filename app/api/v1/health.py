# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Tells monitoring tools whether the service is up and whether it can still reach its database.
# 🧪 Purpose (Technical Summary):
# Health check endpoints: a basic liveness response and a readiness probe that runs the
# connection manager's health check and reports the upload directory state.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.infrastructure.database.connection (via app.state)
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now()


@health_router.get("/health",
                   summary="Health Check",
                   description="Service status including a database connectivity probe")
async def health_check(request: Request) -> JSONResponse:
    """
    Health check endpoint.

    Always answers 200; the ``status`` field is ``healthy`` when the database
    probe succeeds and ``degraded`` otherwise.
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()
    db_manager = getattr(request.app.state, "db_manager", None)

    if db_manager is None:
        database = {"status": "unavailable", "error": "database not initialized"}
    else:
        database = await db_manager.health_check()
        if database.get("status") != "healthy":
            logger.warning(f"Database health check failed: {database.get('error')}")

    file_manager = getattr(request.app.state, "file_manager", None)
    uploads = {
        "directory": str(file_manager.upload_dir) if file_manager else settings.UPLOAD_DIR,
        "exists": bool(file_manager and file_manager.upload_dir.is_dir()),
    }

    overall = "healthy" if database.get("status") == "healthy" else "degraded"
    return JSONResponse(
        status_code=200,
        content={
            "status": overall,
            "timestamp": datetime.now().isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": round((datetime.now() - _app_start_time).total_seconds(), 1),
            "components": {
                "database": database,
                "uploads": uploads,
            },
        },
    )
