from __future__ import annotations

from typing import Protocol

from app.crud.paging import OFFSET_MAX, Page, PageRequest
from app.models.book import Book
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

SORTABLE_COLUMNS = {
    "id": Book.id,
    "title": Book.title,
    "description": Book.description,
}


class BookRepository(Protocol):
    def find_all(self, page_request: PageRequest) -> Page[Book]: ...

    def find_by_id(self, book_id: int) -> Book | None: ...

    def exists_by_id(self, book_id: int) -> bool: ...

    def save(self, book: Book) -> Book: ...

    def delete_by_id(self, book_id: int) -> None: ...


class SqlBookRepository:
    """Plain CRUD over the ``book`` table. One instance per request session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, page_request: PageRequest) -> Page[Book]:
        total = int(
            self.db.execute(select(func.count()).select_from(Book)).scalar_one()
        )

        if page_request.offset > OFFSET_MAX:
            # Past any row the table can hold; the driver would reject the offset
            return Page(items=[], total=total, page=page_request.page, size=page_request.size)

        order_by = []
        for order in page_request.sort:
            col = SORTABLE_COLUMNS[order.field]
            order_by.append(col.desc() if order.direction == "desc" else col.asc())
        # Stable paging when the requested sort has ties
        order_by.append(Book.id.asc())

        stmt = (
            select(Book)
            .order_by(*order_by)
            .limit(page_request.size)
            .offset(page_request.offset)
        )
        items = list(self.db.execute(stmt).scalars().all())
        return Page(
            items=items,
            total=total,
            page=page_request.page,
            size=page_request.size,
        )

    def find_by_id(self, book_id: int) -> Book | None:
        return self.db.get(Book, book_id)

    def exists_by_id(self, book_id: int) -> bool:
        count = self.db.execute(
            select(func.count()).select_from(Book).where(Book.id == book_id)
        ).scalar_one()
        return int(count) > 0

    def save(self, book: Book) -> Book:
        """Insert when ``book.id`` is unset, otherwise overwrite the stored row."""
        if book.id is None:
            self.db.add(book)
            stored = book
        else:
            stored = self.db.merge(book)
        self.db.commit()
        self.db.refresh(stored)
        return stored

    def delete_by_id(self, book_id: int) -> None:
        # Deleting an unknown id is a no-op
        self.db.execute(delete(Book).where(Book.id == book_id))
        self.db.commit()
