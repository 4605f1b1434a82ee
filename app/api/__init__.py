# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package, like a table of contents for the API features.
# 🧪 Purpose (Technical Summary):
# Package initialization for the HTTP layer: versioned routers and middleware.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main

"""
User Records API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/
    │   └── logging.py       # Request logging and request IDs
    └── v1/
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoint
"""

__version__ = "1.0.0"
