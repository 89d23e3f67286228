from __future__ import annotations

from pydantic import BaseModel, Field


class Principal(BaseModel):
    """The authenticated caller, as read from the access token."""

    login: str
    authorities: list[str] = Field(default_factory=list)
