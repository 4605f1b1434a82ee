# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Acts like a traffic director for all API version 1 requests, sending user record requests
# to the user endpoints and status checks to the health endpoint.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation combining the health router and the user management routers
# under their route prefixes, plus a small API info endpoint.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.user_management.presentation.api.v1.users
# 🔄 Connected Modules / Calls From:
# app.main

from fastapi import APIRouter

from app.modules.user_management.presentation.api.v1.users import users_router
from app.shared.config.settings import get_settings

from . import API_TAGS, ROUTE_PREFIXES
from .health import health_router

# Create main API v1 router
api_v1_router = APIRouter()

# Health check router (no prefix - direct access)
api_v1_router.include_router(health_router, tags=[API_TAGS["health"]])

# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=[API_TAGS["users"]])


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="API v1 version information and available endpoints",
                   tags=[API_TAGS["info"]])
async def api_v1_info() -> dict:
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": {
            "health_check": "/api/v1/health",
            "users": f"/api/v1{ROUTE_PREFIXES['users']}",
            "bulk": f"/api/v1{ROUTE_PREFIXES['users']}/bulk",
            "uploads": settings.UPLOAD_URL_PREFIX,
        },
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
        },
    }
