"""Domain service layer."""

from .exceptions import CursorStateError, MappingError, MovieStoreError

__all__ = [
    "CursorStateError",
    "MappingError",
    "MovieStoreError",
]
