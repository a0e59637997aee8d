"""
Pets API — Custom Exception Hierarchy
=======================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by PetService and the repositories; caught by global handlers.

Exception Hierarchy:
    PetsAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (storage fault, no retry)
"""

from typing import Any, Dict, Optional


class PetsAPIError(Exception):
    """
    Base exception for all Pets API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where noted)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PetsAPIError):
    """
    Raised when client input fails validation.

    When:    A required pet field is null/absent on create, or the owner email
             query parameter is missing or empty on list.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Field 'name' is required",
            "details": {"field": "name"}
        }
    """

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


class NotFoundError(PetsAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET or DELETE /api/pets/{id} with an id that has no row.
    HTTP:    404 Not Found

    The repositories return None / False for missing rows; PetService turns
    that into this exception so routes stay free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PetsAPIError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        The original exception type and operation are kept in `context`
        and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
