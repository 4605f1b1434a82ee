# 📄 File: app/shared/config/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gives the rest of the service one place to read its settings from.
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the pydantic-settings Settings class and cached accessor.
# 🔗 Dependencies:
# settings.py
# 🔄 Connected Modules / Calls From:
# app.main, logging, database connection, file storage

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
