"""
Movie API — Movie Service (In-Memory Movie Store)
==================================================

What:  Owns the in-memory movie collection and every query/mutation on it.
How:   A plain Python list of `Movie` records, searched by linear scan.
Who:   Called by the /movies route handlers through dependency injection.
When:  For every movie create, read, update and delete operation.

Semantics:
    - Ids come from a monotonic counter: a deleted id is never handed out
      again, so ids stay unique for the lifetime of the store.
    - Ordering is insertion order; deletions remove, updates replace in place.
    - get/update/delete on an unknown id raise NotFoundError with the message
      "Movie with ID {id} not found.".

Concurrency:
    All operations are synchronous and complete without suspending, so an
    async request handler never observes a half-applied mutation. The store is
    per-process; nothing is shared between uvicorn workers.
"""

import logging
from typing import List

from starlette.requests import Request

from movie_api.exceptions import NotFoundError
from movie_api.schemas.movie import Movie, MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)


def apply_update(movie: Movie, changes: MovieUpdate) -> Movie:
    """
    Overlay the fields set in `changes` on top of `movie`.

    Fields absent from the request keep their current value and `id` is
    always preserved. Returns a new record; `movie` is left untouched.
    """
    update = changes.changes()
    return movie.model_copy(update=update, deep=True)


class MovieService:
    """
    In-memory store for movie records.

    Responsibilities:
        - list_movies(): Every stored movie, in insertion order
        - get_movie(): Single movie lookup with not-found handling
        - create_movie(): Id allocation and append
        - update_movie(): Field overlay, replacing the record in place
        - delete_movie(): Existence check and removal
    """

    def __init__(self) -> None:
        self._movies: List[Movie] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._movies)

    def list_movies(self) -> List[Movie]:
        """Return all movies. The returned list is a copy of the collection."""
        return list(self._movies)

    def get_movie(self, movie_id: int) -> Movie:
        """
        Retrieve a single movie by id.

        Raises:
            NotFoundError: No movie with this id exists (→ 404)
        """
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        raise NotFoundError(resource="Movie", resource_id=movie_id)

    def create_movie(self, data: MovieCreate) -> Movie:
        """Store a new movie and return it with its assigned id."""
        movie = Movie(id=self._next_id, **data.model_dump())
        self._next_id += 1
        self._movies.append(movie)
        logger.info("Movie %d created: %r (%d)", movie.id, movie.title, movie.year)
        return movie

    def delete_movie(self, movie_id: int) -> None:
        """
        Remove a movie from the store.

        Raises:
            NotFoundError: Propagated unchanged from get_movie()
        """
        self.get_movie(movie_id)
        self._movies = [movie for movie in self._movies if movie.id != movie_id]
        logger.info("Movie %d deleted", movie_id)

    def update_movie(self, movie_id: int, changes: MovieUpdate) -> Movie:
        """
        Apply a partial or full update to an existing movie.

        The same overlay serves PUT and PATCH: whichever fields the caller
        sends replace the stored ones, everything else is kept.

        Raises:
            NotFoundError: Propagated unchanged from get_movie()
        """
        movie = self.get_movie(movie_id)
        updated = apply_update(movie, changes)
        index = self._movies.index(movie)
        self._movies[index] = updated
        logger.info("Movie %d updated: fields=%s", movie_id, sorted(changes.changes()))
        return updated


# ── FastAPI Dependency ────────────────────────────────────────────────────
def get_movie_service(request: Request) -> MovieService:
    """
    Provide the store owned by the running application.

    Usage in routes:
        async def list_movies(service: MovieService = Depends(get_movie_service)):
            ...

    The store is created by create_app() and attached to app.state, so every
    application instance (and therefore every test client) has its own.
    """
    return request.app.state.movie_service
