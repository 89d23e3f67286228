from __future__ import annotations

from typing import Any

from app.models.base import Base
from sqlalchemy import BigInteger, Integer, Sequence, String
from sqlalchemy.orm import Mapped, mapped_column

# Shared id sequence; ignored on dialects without sequences (SQLite uses rowid)
sequence_generator = Sequence("sequence_generator", start=1, increment=1)

# Ids are BIGINT; anything outside this range never reaches the driver
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 255


def same_identity(a: Any, b: Any) -> bool:
    """Entity equality for books: identity, not structure.

    Two books are equal when they are the same object, or when both carry an
    assigned id and the ids match. Title and description are ignored, so a
    stale copy of a row still equals the fresh one. A book without an id is
    only ever equal to itself.
    """
    if a is b:
        return True
    if not isinstance(a, Book) or not isinstance(b, Book):
        return False
    return a.id is not None and b.id is not None and a.id == b.id


class Book(Base):
    __tablename__ = "book"

    # BIGINT is not a rowid alias on SQLite, so fall back to INTEGER there
    id: Mapped[int | None] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        sequence_generator,
        primary_key=True,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True
    )

    def __eq__(self, other: object) -> bool:
        return same_identity(self, other)

    # Constant per class: the hash must not change once the store assigns an id.
    def __hash__(self) -> int:
        return hash(Book)

    def __repr__(self) -> str:
        return (
            f"Book{{id={self.id}, title='{self.title}', "
            f"description='{self.description}'}}"
        )
