"""
Noteful Backend: Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for client-facing error scenarios.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by validators and services; caught by global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request (malformed id, missing field)
    ├── ConflictError     → 400 Bad Request (unique name already taken)
    └── NotFoundError     → 404 Not Found

Storage errors are not wrapped: SQLAlchemy exceptions reach their own
handler in main.py unchanged and become a generic 500.
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when client input fails validation.

    When:    Malformed identifier, missing required field, bad embedded reference.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Missing `title` in request body",
            "details": {"field": "title"}
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


class ConflictError(NotefulError):
    """
    Raised when a write would duplicate a value declared unique.

    When:    Creating or renaming a folder/tag to a name already in use.
    HTTP:    400 Bad Request, with a message naming the entity type
             ("The folder name already exists").
    """

    def __init__(
        self,
        entity: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        super().__init__(message=f"The {entity} name already exists", context=ctx)
        self.entity = entity


class NotFoundError(NotefulError):
    """
    Raised when a well-formed identifier matches no document.

    HTTP:    404 Not Found

    Distinct from ValidationError: a malformed id never reaches storage and
    is reported as 400, only a syntactically valid id can be "not found".
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
