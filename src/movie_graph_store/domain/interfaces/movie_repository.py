"""Abstract movie repository used by domain logic."""
from typing import Optional, Protocol

from ..models.movie import MovieRecord


class MovieRepository(Protocol):
    """Interface for movie lookups."""

    async def find_movies_by_title(
        self,
        title: str,
        database: Optional[str] = None,
    ) -> list[MovieRecord]:
        """Return every movie whose title equals ``title`` exactly."""
        raise NotImplementedError
