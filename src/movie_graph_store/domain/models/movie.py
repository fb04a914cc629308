from typing import Optional

from pydantic import BaseModel, ConfigDict


class MovieRecord(BaseModel):
    """Immutable projection of a ``:Movie`` node."""

    title: str
    tagline: str
    released_year: Optional[int] = None

    model_config = ConfigDict(frozen=True, strict=True)
