"""
Movie API — Movie Service Unit Tests
=====================================

What:  Tests for the in-memory MovieService (list, get, create, update, delete).
How:   Calls the service directly; no HTTP involved.

What we test:
    ✅ Create assigns ids and stores the record
    ✅ Get returns the stored record, NotFoundError with exact message otherwise
    ✅ Delete removes the record and propagates NotFoundError
    ✅ Update overlays set fields, keeps the rest, keeps position
    ✅ Ids are never reissued after a delete
"""

import pytest

from movie_api.exceptions import NotFoundError
from movie_api.schemas.movie import Movie, MovieCreate, MovieUpdate
from movie_api.services.movie_service import MovieService, apply_update


class TestMovieServiceList:
    """Tests for list_movies."""

    def setup_method(self):
        self.service = MovieService()

    def test_list_empty(self):
        assert self.service.list_movies() == []

    def test_list_returns_insertion_order(self):
        for title in ("First", "Second", "Third"):
            self.service.create_movie(MovieCreate(title=title, year=2020))

        titles = [movie.title for movie in self.service.list_movies()]
        assert titles == ["First", "Second", "Third"]

    def test_list_is_a_copy(self):
        """Mutating the returned list must not change the store."""
        self.service.create_movie(MovieCreate(title="Kept", year=2020))

        movies = self.service.list_movies()
        movies.clear()

        assert len(self.service) == 1


class TestMovieServiceGet:
    """Tests for get_movie retrieval."""

    def setup_method(self):
        self.service = MovieService()

    def test_get_after_create(self, sample_movie_data):
        self.service.create_movie(MovieCreate(**sample_movie_data))

        movie = self.service.get_movie(1)

        assert movie == Movie(id=1, title="Test Movie", year=2023, genres=["Action", "test"])

    def test_get_missing_on_empty_store(self):
        with pytest.raises(NotFoundError) as exc_info:
            self.service.get_movie(999)

        assert exc_info.value.message == "Movie with ID 999 not found."
        assert str(exc_info.value) == "Movie with ID 999 not found."
        assert exc_info.value.context["resource_id"] == 999


class TestMovieServiceCreate:
    """Tests for create_movie."""

    def setup_method(self):
        self.service = MovieService()

    def test_create_assigns_sequential_ids(self):
        first = self.service.create_movie(MovieCreate(title="A", year=2001))
        second = self.service.create_movie(MovieCreate(title="B", year=2002))

        assert (first.id, second.id) == (1, 2)
        assert len(self.service) == 2

    def test_create_defaults_genres_to_empty(self):
        movie = self.service.create_movie(MovieCreate(title="No Genres", year=2023))

        assert movie.genres == []

    def test_ids_not_reused_after_delete(self):
        """Deleting then creating must not hand out an id that is still in use."""
        self.service.create_movie(MovieCreate(title="A", year=2001))
        self.service.create_movie(MovieCreate(title="B", year=2002))
        self.service.delete_movie(1)

        third = self.service.create_movie(MovieCreate(title="C", year=2003))

        ids = [movie.id for movie in self.service.list_movies()]
        assert third.id == 3
        assert len(ids) == len(set(ids))


class TestMovieServiceDelete:
    """Tests for delete_movie."""

    def setup_method(self):
        self.service = MovieService()

    def test_delete_then_get_raises(self, sample_movie_data):
        self.service.create_movie(MovieCreate(**sample_movie_data))

        self.service.delete_movie(1)

        with pytest.raises(NotFoundError, match="Movie with ID 1 not found."):
            self.service.get_movie(1)

    def test_delete_first_of_two(self):
        self.service.create_movie(MovieCreate(title="First", year=2001))
        second = self.service.create_movie(MovieCreate(title="Second", year=2002))

        self.service.delete_movie(1)

        assert self.service.list_movies() == [second]

    def test_delete_missing(self):
        with pytest.raises(NotFoundError, match="Movie with ID 999 not found."):
            self.service.delete_movie(999)

    def test_delete_twice(self):
        self.service.create_movie(MovieCreate(title="Once", year=2001))
        self.service.delete_movie(1)

        with pytest.raises(NotFoundError, match="1"):
            self.service.delete_movie(1)

    def test_size_tracks_creates_minus_deletes(self):
        for i in range(5):
            self.service.create_movie(MovieCreate(title=f"Movie {i}", year=2000 + i))
        self.service.delete_movie(2)
        self.service.delete_movie(4)

        assert len(self.service) == 3


class TestMovieServiceUpdate:
    """Tests for update_movie and the apply_update overlay."""

    def setup_method(self):
        self.service = MovieService()

    def test_update_title_only(self):
        created = self.service.create_movie(MovieCreate(title="T", year=2023))

        updated = self.service.update_movie(created.id, MovieUpdate(title="Updated Title"))

        assert updated.id == created.id
        assert updated.title == "Updated Title"
        assert updated.year == 2023
        assert self.service.get_movie(created.id) == updated

    def test_update_all_fields(self, sample_movie_data):
        self.service.create_movie(MovieCreate(**sample_movie_data))

        updated = self.service.update_movie(
            1, MovieUpdate(title="Completely Updated Movie", year=2025, genres=["New Genre"])
        )

        assert updated == Movie(id=1, title="Completely Updated Movie", year=2025, genres=["New Genre"])

    def test_update_keeps_position(self):
        for title in ("A", "B", "C"):
            self.service.create_movie(MovieCreate(title=title, year=2000))

        self.service.update_movie(2, MovieUpdate(title="B2"))

        titles = [movie.title for movie in self.service.list_movies()]
        assert titles == ["A", "B2", "C"]

    def test_update_missing(self):
        with pytest.raises(NotFoundError, match="Movie with ID 42 not found."):
            self.service.update_movie(42, MovieUpdate(title="Nope"))

    def test_update_deleted(self):
        self.service.create_movie(MovieCreate(title="Gone", year=2001))
        self.service.delete_movie(1)

        with pytest.raises(NotFoundError):
            self.service.update_movie(1, MovieUpdate(year=2002))

    def test_apply_update_empty_changes(self):
        movie = Movie(id=7, title="Same", year=1999, genres=["Drama"])

        result = apply_update(movie, MovieUpdate())

        assert result == movie

    def test_apply_update_does_not_mutate_original(self):
        movie = Movie(id=7, title="Original", year=1999, genres=["Drama"])

        result = apply_update(movie, MovieUpdate(genres=["Comedy"]))

        assert movie.genres == ["Drama"]
        assert result.genres == ["Comedy"]
        assert result.id == 7
