# 📄 File: app/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the application folder as a Python package and records what the service is called.
# 🧪 Purpose (Technical Summary):
# Root package metadata for the user records backend.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# Packaging, app.main

"""
User Records API

Backend service for user profile records: single and bulk creation, full and
partial updates, deletion, and profile photo uploads.
"""

__version__ = "1.0.0"
__title__ = "User Records API"
__description__ = "User profile records service"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
