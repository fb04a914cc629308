"""Read movies from a Neo4j graph into immutable records."""

from .domain.models import MovieRecord
from .domain.services import CursorStateError, MappingError, MovieStoreError
from .infrastructure import (
    MOVIE_BY_TITLE_QUERY,
    Neo4jMovieRepository,
    SessionOptions,
    get_movie_store,
)

__version__ = "0.1.0"

__all__ = [
    "MOVIE_BY_TITLE_QUERY",
    "CursorStateError",
    "MappingError",
    "MovieRecord",
    "MovieStoreError",
    "Neo4jMovieRepository",
    "SessionOptions",
    "get_movie_store",
]
