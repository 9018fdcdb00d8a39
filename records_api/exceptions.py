"""
Records API - Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for each failure the API reports.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{success: false, msg, error?}` envelope with the right
       HTTP status code.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    RecordsAPIError (base)
    ├── ValidationError   → 400 Bad Request (missing/empty field, bad type)
    ├── ConflictError     → 400 Bad Request (uniqueness violation)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (raw error text in `error`)
"""

from typing import Any, Dict, Optional


class RecordsAPIError(Exception):
    """
    Base exception for all Records API errors.

    Attributes:
        message:  User-facing description, rendered as the envelope `msg`
        context:  Additional debug info (logged, not returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RecordsAPIError):
    """
    Raised when client input fails validation.

    When:    Required field missing or empty, identifier malformed.
    HTTP:    400 Bad Request

    Example response:
        {"success": false, "msg": "Name is required"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(RecordsAPIError):
    """
    Raised when the store rejects a write because of a unique constraint.

    When:    Creating a student with an email another student already uses.
    HTTP:    400 Bad Request, with a message distinct from generic failures.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Record already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RecordsAPIError):
    """
    Raised when a requested record does not exist.

    SQLAlchemy returns None for missing rows; services convert that None
    into this exception so the handler can answer 404.

    Example response:
        {"success": false, "msg": "Author not found"}
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Record",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message or f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(RecordsAPIError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost mid-query, table missing, driver error.
    HTTP:    500 Internal Server Error

    The envelope carries the raw failure text in `error`. This service holds
    no sensitive data and the text is what operators need to diagnose a
    broken deployment.

    Example response:
        {"success": false, "msg": "Server error", "error": "connection refused"}
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Server error",
        detail: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.detail = detail
