"""
Ride Service: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a client-safe message, a stable error code, the
       HTTP status it maps to, and an optional context dict for server logs.
       Global exception handlers (registered in main.py) turn them into
       `{"error_code": ..., "message": ...}` JSON responses.
Who:   Raised by services and route helpers; caught by global handlers.

Exception Hierarchy:
    RideServiceError (base)
    ├── ValidationError   → 400 VALIDATION_ERROR
    ├── NotFoundError     → 404 RIDES_NOT_FOUND_ERROR
    └── DatabaseError     → 500 SERVER_ERROR
"""

from typing import Any, Dict, Optional


class RideServiceError(Exception):
    """
    Base exception for all Ride Service application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        error_code:   Stable machine-readable code returned as `error_code`
        status_code:  HTTP status used by the global handler
    """

    error_code: str = "SERVER_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str = "Unknown error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RideServiceError):
    """
    Raised when client input fails validation.

    The message is one of a fixed catalog (see services/validation.py) and is
    returned verbatim to the client.

    Example response:
        {
            "error_code": "VALIDATION_ERROR",
            "message": "Rider name must be a non empty string"
        }
    """

    error_code = "VALIDATION_ERROR"
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


class NotFoundError(RideServiceError):
    """
    Raised when no ride matches the request.

    When:    GET /rides on an empty table, GET /rides/{id} with an unknown or
             malformed id.
    """

    error_code = "RIDES_NOT_FOUND_ERROR"
    status_code = 404

    def __init__(
        self,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="Could not find any rides", context=ctx)


class DatabaseError(RideServiceError):
    """
    Raised when a database operation fails unexpectedly.

    The client always receives the generic "Unknown error" message; the
    underlying exception type and query context are logged server-side only.
    """

    def __init__(
        self,
        message: str = "Unknown error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
