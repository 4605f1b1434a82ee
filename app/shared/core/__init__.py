# 📄 File: app/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the error types the service raises so other modules can import them in one place.
# 🧪 Purpose (Technical Summary):
# Core package exporting the UserServiceException hierarchy and classification helpers.
# 🔗 Dependencies:
# exceptions.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, storage, app.main exception handlers

from .exceptions import (
    DatabaseError,
    DuplicateKeyError,
    EmptyUpdateError,
    FileStorageError,
    FileTooLargeError,
    InvalidBatchError,
    InvalidIdentifierError,
    MissingIdentifierError,
    RecordNotFoundError,
    StorageError,
    UnsupportedMediaTypeError,
    UserServiceException,
    ValidationError,
    is_server_error,
)

__all__ = [
    "UserServiceException",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidBatchError",
    "MissingIdentifierError",
    "EmptyUpdateError",
    "UnsupportedMediaTypeError",
    "FileTooLargeError",
    "RecordNotFoundError",
    "DuplicateKeyError",
    "StorageError",
    "DatabaseError",
    "FileStorageError",
    "is_server_error",
]
