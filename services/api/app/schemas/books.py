from __future__ import annotations

from typing import Annotated

from app.models.book import ID_MAX, ID_MIN, TITLE_MAX_LENGTH, TITLE_MIN_LENGTH
from pydantic import BaseModel, Field, StringConstraints

# Field constraints for Book payloads, checked by FastAPI before the handler runs.
BookId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]
Title = Annotated[
    str, StringConstraints(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
]
Description = str


class BookIn(BaseModel):
    """Body of POST and PUT: the full field set, title required."""

    id: BookId | None = None
    title: Title
    description: Description | None = None


class BookPatchIn(BaseModel):
    """Body of PATCH: every field optional; null means "leave as stored"."""

    id: BookId | None = None
    title: Title | None = None
    description: Description | None = None


class BookOut(BaseModel):
    id: int
    title: str
    description: str | None

    class Config:
        from_attributes = True
