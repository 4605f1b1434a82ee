# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The user records module: everything about storing and changing user profile records.
# 🧪 Purpose (Technical Summary):
# Module package following the domain / infrastructure / presentation layering.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

"""
User Management Module

Architecture:
- Domain: UserRecord model, field coercion, credential policy, asset intake,
  repository interface and the UserRecordService
- Infrastructure: SQLAlchemy model and repository implementation
- Presentation: FastAPI router, response schemas and request readers
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
