# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database side of the user records module.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package holding the SQLAlchemy model and repository implementation.
# 🔗 Dependencies:
# database subpackage
# 🔄 Connected Modules / Calls From:
# app.main, migrations

__all__ = []
