import pytest
from pydantic import ValidationError

from movie_graph_store.domain.models import MovieRecord


class TestMovieRecord:
    """MovieRecord is a strict, immutable value type."""

    def test_fields(self):
        movie = MovieRecord(title="Foo", tagline="Bar", released_year=1900)

        assert movie.title == "Foo"
        assert movie.tagline == "Bar"
        assert movie.released_year == 1900

    def test_release_year_is_optional(self):
        assert MovieRecord(title="Foo", tagline="Bar").released_year is None

    def test_value_equality_and_hashing(self):
        first = MovieRecord(title="Foo", tagline="Bar", released_year=1900)
        second = MovieRecord(title="Foo", tagline="Bar", released_year=1900)

        assert first == second
        assert len({first, second}) == 1

    def test_frozen(self):
        movie = MovieRecord(title="Foo", tagline="Bar", released_year=1900)

        with pytest.raises(ValidationError):
            movie.title = "Baz"

    @pytest.mark.parametrize(
        "values",
        [
            {"title": None, "tagline": "Bar"},
            {"title": "Foo", "tagline": 7},
            {"title": "Foo", "tagline": "Bar", "released_year": "1900"},
        ],
    )
    def test_strict_types(self, values):
        with pytest.raises(ValidationError):
            MovieRecord(**values)

    def test_model_dump(self):
        movie = MovieRecord(title="Foo", tagline="Bar", released_year=1900)

        assert movie.model_dump() == {
            "title": "Foo",
            "tagline": "Bar",
            "released_year": 1900,
        }
