"""
Employee API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and a uniform JSON error body.
Who:   Raised by the connection pool and the services; caught by handlers.

Exception Hierarchy:
    EmployeeAPIError (base)
    ├── NotFoundError                → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error
        └── DatabaseConnectionError  → 500 (store unreachable)

Request body and path decoding failures are reported by FastAPI as
RequestValidationError and rendered in the same error format with a
422 status (see main.py).
"""

from typing import Any, Dict, Optional


class EmployeeAPIError(Exception):
    """
    Base exception for all Employee API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(EmployeeAPIError):
    """
    Raised when a lookup, update or delete by id matched no row.

    What:    Zero rows returned by SELECT, or zero affected rows on UPDATE/DELETE.
    HTTP:    404 Not Found, always with the message "<Resource> not found".
    """

    def __init__(
        self,
        resource: str = "Employee",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id


class DatabaseError(EmployeeAPIError):
    """
    Raised when a database statement fails.

    What:    Constraint violation, type mismatch, lost connection mid-query, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The driver error,
        statement and parameters live in `context` and are logged server-side.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseConnectionError(DatabaseError):
    """
    Raised by the connection pool when no connection to the store can be opened.

    Not retried internally; it propagates to the caller like any DatabaseError.
    """

    def __init__(
        self,
        message: str = "Database is unreachable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
