# 📄 File: app/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared helpers used across the service, currently the structured logging setup.
# 🧪 Purpose (Technical Summary):
# Utilities package exporting logging configuration and the StructuredLogger factory.
# 🔗 Dependencies:
# logging.py
# 🔄 Connected Modules / Calls From:
# Every module that logs

from .logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
