"""
Movie API — Pydantic Record and Payload Schemas
================================================

What:  Pydantic models defining the movie record and the API contract.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   The movie store keeps `Movie` instances; routes accept `MovieCreate`
       and `MovieUpdate` bodies and return `Movie` / envelope models.

Validation rules for incoming payloads:
    - Strict types: "2023" is not accepted where an integer year is expected
    - Unknown fields are rejected (extra="forbid")
    - MovieUpdate fields are all optional, but an explicit null is rejected
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Stored Record
# ══════════════════════════════════════════════════════════════════════════


class Movie(BaseModel):
    """
    What:  A movie record as held by the store and returned by the API.

    `id` is assigned by the store at creation and never changes afterwards.
    """
    id: int = Field(description="Store-assigned movie identifier")
    title: str = Field(description="Movie title")
    year: int = Field(description="Release year")
    genres: List[str] = Field(default_factory=list, description="Ordered list of genres")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class MovieCreate(BaseModel):
    """Body of POST /movies. `title` and `year` are required."""
    title: str = Field(description="Movie title")
    year: int = Field(description="Release year")
    genres: List[str] = Field(default_factory=list, description="Optional list of genres")

    model_config = {"extra": "forbid", "strict": True}


class MovieUpdate(BaseModel):
    """
    What:  Body of PUT and PATCH /movies/{id}.
    How:   Every field is optional. Only the fields the client actually sent
           are applied; see `changes()`.
    """
    title: Optional[str] = Field(default=None, description="New title")
    year: Optional[int] = Field(default=None, description="New release year")
    genres: Optional[List[str]] = Field(default=None, description="New list of genres")

    model_config = {"extra": "forbid", "strict": True}

    @field_validator("title", "year", "genres")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Omitting a field keeps its value; sending null is an error."""
        if v is None:
            raise ValueError("Field may be omitted but must not be null")
        return v

    def changes(self) -> Dict[str, Any]:
        """Returns only the fields that were present in the request body."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Envelopes
# ══════════════════════════════════════════════════════════════════════════


class DeleteResponse(BaseModel):
    """Acknowledgment returned by DELETE /movies/{id}."""
    message: str = Field(description="Human-readable success message")
    id: int = Field(description="Identifier of the deleted movie")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "Movie with ID 999 not found.",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    movie_count: int = Field(description="Number of movies currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
