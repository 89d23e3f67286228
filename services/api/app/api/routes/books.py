from __future__ import annotations

import logging
from typing import Annotated

from app.api.deps import get_book_repository, get_current_user
from app.api.errors import BadRequestAlertException
from app.api.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from app.api.pagination import generate_pagination_headers, pageable
from app.core.config import settings
from app.crud.books import SORTABLE_COLUMNS, BookRepository
from app.crud.paging import PageRequest
from app.models.book import ID_MAX, ID_MIN, Book
from app.schemas.books import BookIn, BookOut, BookPatchIn
from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

logger = logging.getLogger(__name__)

ENTITY_NAME = "book"

PATCH_MEDIA_TYPES = {"application/json", "application/merge-patch+json"}

BookIdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]

router = APIRouter(
    prefix="/api",
    tags=["books"],
    dependencies=[Depends(get_current_user)],
)


def _require_patch_media_type(request: Request) -> None:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type not in PATCH_MEDIA_TYPES:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Content type '{content_type}' not supported",
        )


def _check_update_target(book_id: int, body_id: int | None, repo: BookRepository) -> None:
    if body_id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if body_id != book_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    if not repo.exists_by_id(book_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")


@router.post("/books", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookIn,
    response: Response,
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to save Book : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertException(
            "A new book cannot already have an ID", ENTITY_NAME, "idexists"
        )

    result = repo.save(Book(title=payload.title, description=payload.description))

    response.headers["Location"] = f"/api/books/{result.id}"
    response.headers.update(
        create_entity_creation_alert(settings.client_app_name, ENTITY_NAME, str(result.id))
    )
    return result


@router.put("/books/{book_id}", response_model=BookOut)
def update_book(
    book_id: BookIdPath,
    payload: BookIn,
    response: Response,
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to update Book : %s, %s", book_id, payload)
    _check_update_target(book_id, payload.id, repo)

    # Full replace: a missing description clears the stored one
    result = repo.save(
        Book(id=payload.id, title=payload.title, description=payload.description)
    )

    response.headers.update(
        create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(book_id))
    )
    return result


@router.patch(
    "/books/{book_id}",
    response_model=BookOut,
    dependencies=[Depends(_require_patch_media_type)],
)
def partial_update_book(
    book_id: BookIdPath,
    payload: BookPatchIn,
    response: Response,
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to partial update Book partially : %s, %s", book_id, payload)
    _check_update_target(book_id, payload.id, repo)

    # Not atomic with the existence check: a delete in between surfaces as 404,
    # and two concurrent patches of one row are last-write-wins.
    book = repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

    if payload.title is not None:
        book.title = payload.title
    if payload.description is not None:
        book.description = payload.description

    result = repo.save(book)

    response.headers.update(
        create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(book_id))
    )
    return result


@router.get("/books", response_model=list[BookOut])
def get_all_books(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(pageable(SORTABLE_COLUMNS)),
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to get a page of Books")
    page = repo.find_all(page_request)
    response.headers.update(generate_pagination_headers(request.url, page))
    return page.items


@router.get("/books/{book_id}", response_model=BookOut)
def get_book(
    book_id: BookIdPath,
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to get Book : %s", book_id)
    book = repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: BookIdPath,
    repo: BookRepository = Depends(get_book_repository),
):
    logger.debug("REST request to delete Book : %s", book_id)
    repo.delete_by_id(book_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(
            settings.client_app_name, ENTITY_NAME, str(book_id)
        ),
    )
