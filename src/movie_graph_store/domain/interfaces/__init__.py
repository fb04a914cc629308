"""Domain interfaces for dependency inversion."""

from .movie_repository import MovieRepository

__all__ = ["MovieRepository"]
