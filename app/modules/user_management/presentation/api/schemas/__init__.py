# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the answers the user records endpoints send back.
# 🧪 Purpose (Technical Summary):
# Package initialization for pydantic response schemas.
# 🔗 Dependencies:
# user_schemas.py
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.users

from .user_schemas import BulkCreateResponse, UserDeleteResponse, UserResponse

__all__ = ["UserResponse", "BulkCreateResponse", "UserDeleteResponse"]
