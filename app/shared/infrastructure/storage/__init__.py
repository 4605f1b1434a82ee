# 📄 File: app/shared/infrastructure/storage/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code that saves uploaded profile photos to disk.
# 🧪 Purpose (Technical Summary):
# Storage infrastructure package exporting the local FileManager.
# 🔗 Dependencies:
# file_manager.py
# 🔄 Connected Modules / Calls From:
# app.main, AssetIntake

from .file_manager import FileManager

__all__ = ["FileManager"]
