# 📄 File: app/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code that opens, shares and closes database connections.
# 🧪 Purpose (Technical Summary):
# Database infrastructure package: async engine lifecycle and transactional sessions.
# 🔗 Dependencies:
# connection.py, session.py
# 🔄 Connected Modules / Calls From:
# app.main, ORM models, repository implementations, migrations

from .connection import Base, DatabaseConnectionManager
from .session import DatabaseSessionManager

__all__ = ["Base", "DatabaseConnectionManager", "DatabaseSessionManager"]
