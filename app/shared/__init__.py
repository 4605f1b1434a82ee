# 📄 File: app/shared/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the building blocks every part of the service uses: settings, errors, logging,
# the database connection and the photo store.
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, exceptions, infrastructure and utilities.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main, app.modules.*

__all__ = []
