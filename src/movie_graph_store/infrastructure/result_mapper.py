"""Turn Neo4j result rows into ``MovieRecord`` values."""
from typing import Any, Optional, Protocol

from loguru import logger
from neo4j import AsyncResult
from pydantic import ValidationError

from ..domain.models.movie import MovieRecord
from ..domain.services.exceptions import CursorStateError, MappingError

MOVIE_COLUMN = "m"

# Node property -> MovieRecord field
MOVIE_PROPERTIES = {
    "title": "title",
    "tagline": "tagline",
    "released": "released_year",
}


class RowCursor(Protocol):
    """Forward-only, single-pass cursor over result rows."""

    async def advance(self) -> bool: ...

    def current(self) -> Any: ...


class ResultCursor:
    """``RowCursor`` over a driver ``AsyncResult``."""

    def __init__(self, result: AsyncResult) -> None:
        self._result = result
        self._current: Optional[Any] = None

    async def advance(self) -> bool:
        records = await self._result.fetch(1)
        if not records:
            self._current = None
            return False
        self._current = records[0]
        return True

    def current(self) -> Any:
        if self._current is None:
            raise CursorStateError("No current row; advance() the cursor first.")
        return self._current


def decode_movie_row(row: Any, column: str = MOVIE_COLUMN) -> MovieRecord:
    """
    Decode one result row into a ``MovieRecord``.

    The row must hold a node under ``column``. ``title`` and ``tagline`` are
    required string properties; ``released`` is an optional integer and maps
    to ``released_year=None`` when absent or null.

    Raises:
        MappingError: If the column is missing, is not a node, or its
            properties do not match the movie schema.
    """
    try:
        node = row[column]
    except (KeyError, IndexError) as exc:
        raise MappingError("column missing from row", column) from exc

    if node is None or not callable(getattr(node, "get", None)):
        raise MappingError(f"expected a node, got {type(node).__name__}", column)

    values = {field: node.get(prop) for prop, field in MOVIE_PROPERTIES.items()}
    try:
        return MovieRecord.model_validate(values)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else None
        prop = next((p for p, f in MOVIE_PROPERTIES.items() if f == field), field)
        raise MappingError(error["msg"], column, prop) from exc


async def drain_movies(cursor: RowCursor, column: str = MOVIE_COLUMN) -> list[MovieRecord]:
    """Advance ``cursor`` until exhausted, decoding every row."""
    movies: list[MovieRecord] = []
    fetched = await cursor.advance()
    while fetched:
        movies.append(decode_movie_row(cursor.current(), column))
        fetched = await cursor.advance()
    logger.debug(f"Mapped {len(movies)} movie rows from column '{column}'.")
    return movies
