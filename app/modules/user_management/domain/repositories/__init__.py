# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The contract for saving and finding user records, without naming a database.
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces.
# 🔗 Dependencies:
# user_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations, test fakes

from .user_repository import UserRepository

__all__ = ["UserRepository"]
