"""
Movie API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios of the store.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by the movie store; caught by the global handlers.

Exception Hierarchy:
    MovieAPIError (base)          → 500 Internal Server Error
    └── NotFoundError             → 404 Not Found

Request payload and path validation is not represented here: FastAPI raises
its own RequestValidationError, which main.py maps to 400.
"""

from typing import Any, Dict, Optional


class MovieAPIError(Exception):
    """
    Base exception for all Movie API application errors.

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


class NotFoundError(MovieAPIError):
    """
    Raised when a requested resource does not exist in the store.

    When:    GET/PUT/PATCH/DELETE /movies/{id} with an id that was never
             created or has been deleted.
    HTTP:    404 Not Found

    Message format: "Movie with ID 999 not found."
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found."
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
