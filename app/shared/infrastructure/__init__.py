# 📄 File: app/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the pieces that talk to the outside world: the database and the photo folder.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for database connection/session management and local file storage.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main, repository implementations, asset intake

__all__ = []
