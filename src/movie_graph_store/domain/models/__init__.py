"""Domain models."""

from .movie import MovieRecord

__all__ = ["MovieRecord"]
