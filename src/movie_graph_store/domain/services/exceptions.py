"""Exceptions raised by the movie store."""

from typing import Optional


class MovieStoreError(Exception):
    """Base exception for movie store errors."""

    pass


class MappingError(MovieStoreError):
    """Error raised when a result row cannot be decoded into a movie."""

    def __init__(
        self,
        message: str,
        column: str,
        field: Optional[str] = None,
    ) -> None:
        self.column = column
        self.field = field
        location = f"column '{column}'" if field is None else f"'{column}.{field}'"
        super().__init__(f"Cannot map {location}: {message}")


class CursorStateError(MovieStoreError):
    """Error raised when a cursor is read without a current row."""

    pass
