"""Session configuration passed to ``AsyncDriver.session``."""
from typing import Any, Optional

from neo4j import READ_ACCESS
from pydantic import BaseModel, ConfigDict, Field


class SessionOptions(BaseModel):
    """Options for a read-only session.

    ``database=None`` leaves the choice to the driver, which then uses the
    server's default (home) database.
    """

    database: Optional[str] = None
    fetch_size: Optional[int] = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_database(cls, database: Optional[str]) -> "SessionOptions":
        return cls(database=database)

    def to_session_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"default_access_mode": READ_ACCESS}
        if self.database:
            kwargs["database"] = self.database
        if self.fetch_size is not None:
            kwargs["fetch_size"] = self.fetch_size
        return kwargs
