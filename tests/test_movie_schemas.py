"""
Movie API — Payload Schema Tests
=================================

What:  Validation rules of MovieCreate and MovieUpdate.
Why:   These models are the only input validation the store relies on.
"""

import pytest
from pydantic import ValidationError

from movie_api.schemas.movie import MovieCreate, MovieUpdate


class TestMovieCreate:

    def test_required_fields_only(self):
        payload = MovieCreate.model_validate({"title": "New Movie", "year": 2023})
        assert payload.genres == []

    @pytest.mark.parametrize("body", [
        {"year": 2023},
        {"title": "Movie Without Year"},
        {"title": 123, "year": "not-a-number"},
        {"title": "Movie", "year": "2023"},
        {"title": "Movie", "year": 2023, "genres": "Action"},
        {"title": "Movie", "year": 2023, "rating": 5},
    ])
    def test_rejected_payloads(self, body):
        with pytest.raises(ValidationError):
            MovieCreate.model_validate(body)


class TestMovieUpdate:

    def test_changes_only_contains_sent_fields(self):
        payload = MovieUpdate.model_validate({"title": "Updated Title"})
        assert payload.changes() == {"title": "Updated Title"}

    def test_empty_update(self):
        assert MovieUpdate.model_validate({}).changes() == {}

    def test_null_rejected(self):
        with pytest.raises(ValidationError, match="must not be null"):
            MovieUpdate.model_validate({"title": None})

    def test_mistyped_year_rejected(self):
        with pytest.raises(ValidationError):
            MovieUpdate.model_validate({"year": "invalid-year"})

    def test_id_is_not_updatable(self):
        with pytest.raises(ValidationError):
            MovieUpdate.model_validate({"id": 5})
