# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the API so later versions can be added without breaking existing clients.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 holding route prefixes and OpenAPI tags shared by
# the v1 router.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
User Records API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoint
"""

from typing import Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"

# Route prefixes for module routers
ROUTE_PREFIXES: Dict[str, str] = {
    "users": "/users",
}

# OpenAPI tags
API_TAGS: Dict[str, str] = {
    "health": "Health Check",
    "users": "Users",
    "info": "API Info",
}

__all__ = ["ROUTE_PREFIXES", "API_TAGS"]
