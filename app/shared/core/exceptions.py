# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the user records service uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# typing, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, file storage, app.main exception handlers

from typing import Any, Dict, Optional
from fastapi import status


class UserServiceException(Exception):
    """
    Base exception class for the user records service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# CLIENT INPUT EXCEPTIONS
# =============================================================================

class InvalidIdentifierError(UserServiceException):
    """
    Exception raised when a record identifier does not parse as an integer.
    """

    def __init__(
        self,
        value: Any = None,
        message: str = "Invalid ID",
        field: str = "id",
        index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["field"] = field
        details["value"] = str(value)
        if index is not None:
            details["index"] = index

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_IDENTIFIER"
        )


class ValidationError(UserServiceException):
    """
    Exception raised when the request body itself cannot be read
    (malformed JSON, or a JSON value of the wrong shape).
    """

    def __init__(
        self,
        message: str = "Invalid request body",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class InvalidBatchError(UserServiceException):
    """
    Exception raised when a bulk payload is not a usable sequence of field maps.
    """

    def __init__(
        self,
        message: str = "Request body must be a non-empty list of records",
        received_type: Optional[str] = None,
        index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if received_type:
            details["received_type"] = received_type
        if index is not None:
            details["index"] = index

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_BATCH"
        )


class MissingIdentifierError(UserServiceException):
    """
    Exception raised when a bulk update entry does not carry an ``id``.
    """

    def __init__(
        self,
        index: int,
        message: Optional[str] = None,
        committed_ids: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["field"] = "id"
        details["failed_index"] = index
        details["committed_ids"] = list(committed_ids or [])

        super().__init__(
            message=message or f"Entry {index} is missing the required 'id' field",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="MISSING_IDENTIFIER"
        )


class EmptyUpdateError(UserServiceException):
    """
    Exception raised when an update request carries no updatable field.
    """

    def __init__(
        self,
        message: str = "At least one field must be sent for update",
        accepted_fields: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if accepted_fields:
            details["accepted_fields"] = accepted_fields

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="EMPTY_UPDATE"
        )


class UnsupportedMediaTypeError(UserServiceException):
    """
    Exception raised when an uploaded file's declared MIME type is not allowed.
    """

    def __init__(
        self,
        message: str = "File type not allowed",
        filename: Optional[str] = None,
        expected_types: Optional[list] = None,
        actual_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["field"] = "profilePhoto"
        if filename:
            details["filename"] = filename
        if expected_types:
            details["expected_types"] = expected_types
        if actual_type:
            details["actual_type"] = actual_type

        super().__init__(
            message=message,
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            details=details,
            error_code="UNSUPPORTED_MEDIA_TYPE"
        )


class FileTooLargeError(UserServiceException):
    """
    Exception raised when uploaded file exceeds allowed size.
    """
    def __init__(
        self,
        message: str = "Uploaded file is too large",
        max_size_bytes: Optional[int] = None,
        actual_size_bytes: Optional[int] = None,
        filename: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["field"] = "profilePhoto"
        if max_size_bytes is not None:
            details["max_size_bytes"] = max_size_bytes
        if actual_size_bytes is not None:
            details["actual_size_bytes"] = actual_size_bytes
        if filename:
            details["filename"] = filename

        super().__init__(
            message=message,
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details=details,
            error_code="FILE_TOO_LARGE"
        )


# =============================================================================
# RECORD STATE EXCEPTIONS
# =============================================================================

class RecordNotFoundError(UserServiceException):
    """
    Exception raised when the requested record does not exist.
    Never conflated with a server error.
    """

    def __init__(
        self,
        record_id: Any = None,
        message: Optional[str] = None,
        resource_type: str = "user",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["resource_type"] = resource_type
        if record_id is not None:
            details["resource_id"] = record_id

        super().__init__(
            message=message or "User not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="RECORD_NOT_FOUND"
        )


class DuplicateKeyError(UserServiceException):
    """
    Exception raised when a unique constraint (email) is violated.
    """

    def __init__(
        self,
        message: str = "A user with this email is already registered",
        field: Optional[str] = "email",
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_KEY"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class StorageError(UserServiceException):
    """
    Exception raised for unexpected repository failures.
    Reported, never retried.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = "user",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="STORAGE_ERROR"
        )


class DatabaseError(UserServiceException):
    """
    Exception raised for database connection and session failures.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class FileStorageError(UserServiceException):
    """
    Exception raised for file storage operation failures.
    Used for disk write errors on photo uploads.
    """

    def __init__(
        self,
        message: str = "File storage error",
        operation: Optional[str] = None,
        filename: Optional[str] = None,
        storage_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if filename:
            details["filename"] = filename
        if storage_path:
            details["storage_path"] = storage_path

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="FILE_STORAGE_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_server_error(exception: Exception) -> bool:
    """
    Check if exception represents a server error (5xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if server error, False otherwise
    """
    if isinstance(exception, UserServiceException):
        return 500 <= exception.status_code < 600

    return True  # Default to server error for unknown exceptions
