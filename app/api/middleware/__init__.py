# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that look at every request before and after it reaches an endpoint.
# 🧪 Purpose (Technical Summary):
# Package initialization for HTTP middleware components.
# 🔗 Dependencies:
# starlette middleware
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware", "REQUEST_ID_HEADER"]
