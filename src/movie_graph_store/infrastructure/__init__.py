"""Infrastructure implementations of domain interfaces."""

from .neo4j_repository import MOVIE_BY_TITLE_QUERY, Neo4jMovieRepository
from .neo4j_utils import (
    close_neo4j_driver,
    create_neo4j_driver,
    get_movie_store,
    get_neo4j_driver,
)
from .result_mapper import ResultCursor, decode_movie_row, drain_movies
from .session_options import SessionOptions

__all__ = [
    "MOVIE_BY_TITLE_QUERY",
    "Neo4jMovieRepository",
    "ResultCursor",
    "SessionOptions",
    "close_neo4j_driver",
    "create_neo4j_driver",
    "decode_movie_row",
    "drain_movies",
    "get_movie_store",
    "get_neo4j_driver",
]
