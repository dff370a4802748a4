"""Books — CRUD routes for the catalog, all under /books.

Invariants:
    - Request bodies are validated by BookPayload (strict) before the handler runs;
      failures become 400 via the RequestValidationError handler
    - Every success response is an envelope: {book}, {books} or {message}
    - PUT body isbn must equal the path isbn; an unknown path isbn is a 404
      before the mismatch is reported

Design Decisions:
    - Thin routes: all SQL lives in BookStore, all error shaping in error_handlers
    - Query filters read from request.query_params so arbitrary keys reach the
      whitelist in core/book_filters.py instead of being declared here
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import IsbnMismatchError
from app.infrastructure.database import get_db
from app.schemas.book import (
    BookListResponse, BookOut, BookPayload, BookResponse, MessageResponse,
)
from app.services.book_store import BookStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


def get_book_store(db: AsyncSession = Depends(get_db)) -> BookStore:
    return BookStore(db)


@router.get("", response_model=BookListResponse)
async def list_books(
    request: Request, store: BookStore = Depends(get_book_store),
):
    """List books, filtered by any Book column passed in the query string."""
    books = await store.find_all(dict(request.query_params))
    return BookListResponse(books=[BookOut.model_validate(b) for b in books])


@router.get("/{isbn}", response_model=BookResponse)
async def get_book(isbn: str, store: BookStore = Depends(get_book_store)):
    book = await store.find_one(isbn)
    return BookResponse(book=BookOut.model_validate(book))


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookPayload, store: BookStore = Depends(get_book_store),
):
    """Create a book from a complete, well-typed payload."""
    book = await store.create(body.model_dump())
    return BookResponse(book=BookOut.model_validate(book))


@router.put("/{isbn}", response_model=BookResponse)
async def update_book(
    isbn: str, body: BookPayload, store: BookStore = Depends(get_book_store),
):
    """Replace every field of an existing book."""
    if body.isbn != isbn:
        await store.find_one(isbn)
        raise IsbnMismatchError(isbn)
    book = await store.update(isbn, body.model_dump())
    return BookResponse(book=BookOut.model_validate(book))


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(isbn: str, store: BookStore = Depends(get_book_store)):
    await store.remove(isbn)
    return MessageResponse(message="Book deleted")
