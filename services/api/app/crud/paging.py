from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

# SQL OFFSET is a signed 64-bit value on every supported backend
OFFSET_MAX = 2**63 - 1

Direction = Literal["asc", "desc"]


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: Direction = "asc"


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and sort orders, applied in sequence."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return ceil(self.total / self.size)
