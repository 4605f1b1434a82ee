# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes how user records are stored in the database table.
#
# 🧪 Purpose (Technical Summary):
# Database layer for the user management module: ORM model and repository implementation.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
# - app.shared.infrastructure.database (shared database utilities)
#
# 🔄 Connected Modules / Calls From:
# - app.main (repository construction, table registration)
# - migrations/env.py

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.models import UserModel
    from app.modules.user_management.infrastructure.database.user_repository_impl import SQLAlchemyUserRepository


__all__ = [
    "UserModel",
    "SQLAlchemyUserRepository",
]
