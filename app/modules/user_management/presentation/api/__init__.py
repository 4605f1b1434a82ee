# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the web endpoints for user records.
# 🧪 Purpose (Technical Summary):
# API package for the user management module, versioned under v1 with shared schemas.
# 🔗 Dependencies:
# v1, schemas subpackages
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

__all__ = []
