# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the user records endpoints.
# 🧪 Purpose (Technical Summary):
# Package initialization for v1 routers of the user management module.
# 🔗 Dependencies:
# users.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

__all__ = ["users_router"]

from .users import users_router
