# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the user records module, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer package: models, services and repository interfaces.
# 🔗 Dependencies:
# models, services, repositories subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure and presentation layers, app.main

from .models.user import UserRecord
from .repositories.user_repository import UserRepository
from .services.user_service import UserRecordService

__all__ = ["UserRecord", "UserRepository", "UserRecordService"]
