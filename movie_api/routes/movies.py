"""
Movie API — Movie Route Handlers
=================================

What:  CRUD endpoints for movie records under /movies.
How:   FastAPI validates path ids and bodies, the handler forwards the
       validated values to the MovieService, and returns the result.
Who:   Called by any HTTP client of the API.

Error Responses (produced by the global handlers in main.py):
    400: Non-integer / non-positive id, missing or mistyped body fields,
         unknown body fields
    404: No movie with the given id (NotFoundError from the store)

Handlers never catch NotFoundError themselves.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from movie_api.schemas.movie import (
    DeleteResponse,
    ErrorResponse,
    Movie,
    MovieCreate,
    MovieUpdate,
)
from movie_api.services.movie_service import MovieService, get_movie_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/movies", tags=["Movies"])

MovieId = Annotated[int, Path(ge=1, description="Store-assigned movie identifier (positive integer)")]

NOT_FOUND = {404: {"description": "Movie not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid id or payload", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Movie],
    summary="List all movies",
)
async def list_movies(
    service: MovieService = Depends(get_movie_service),
) -> List[Movie]:
    """Returns every stored movie in insertion order. No filtering or pagination."""
    return service.list_movies()


@router.get(
    "/{movie_id}",
    response_model=Movie,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Get a single movie by ID",
)
async def get_movie(
    movie_id: MovieId,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    return service.get_movie(movie_id)


@router.post(
    "",
    status_code=201,
    response_model=Movie,
    responses={**BAD_REQUEST},
    summary="Create a movie",
    description="Creates a movie from `title`, `year` and optional `genres`. The id is assigned by the server.",
)
async def create_movie(
    payload: MovieCreate,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    return service.create_movie(payload)


@router.delete(
    "/{movie_id}",
    response_model=DeleteResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Delete a movie",
)
async def delete_movie(
    movie_id: MovieId,
    service: MovieService = Depends(get_movie_service),
) -> DeleteResponse:
    service.delete_movie(movie_id)
    return DeleteResponse(message=f"Movie with ID {movie_id} deleted.", id=movie_id)


@router.put(
    "/{movie_id}",
    response_model=Movie,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Replace a movie",
)
async def replace_movie(
    movie_id: MovieId,
    payload: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """
    Full update. Callers are expected to send every field; the store applies
    the body with the same overlay as PATCH, so omitted fields are kept.
    """
    return service.update_movie(movie_id, payload)


@router.patch(
    "/{movie_id}",
    response_model=Movie,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Partially update a movie",
)
async def patch_movie(
    movie_id: MovieId,
    payload: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Merges the sent fields into the stored movie; the id never changes."""
    return service.update_movie(movie_id, payload)
