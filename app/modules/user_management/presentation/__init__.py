# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of the user records module.
# 🧪 Purpose (Technical Summary):
# Presentation layer package: FastAPI router, response schemas and request dependencies.
# 🔗 Dependencies:
# api subpackage, dependencies.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.v1.users import users_router

__all__ = ["users_router"]
