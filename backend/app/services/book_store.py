"""Book Store — data access for the books table, one SQL statement per operation.

Invariants:
    - Every operation issues exactly one parameterized statement (no joins, no
      multi-statement transactions)
    - find_one/update/remove raise BookNotFoundError when no row matches
    - Duplicate isbn on create surfaces as DatabaseError (primary-key constraint,
      no pre-check)
    - Filter keys reach the query only after core/book_filters.py whitelisting

Design Decisions:
    - RETURNING on INSERT/UPDATE/DELETE: the affected row (or its absence) comes
      back from the same statement, so no read-after-write round trip
    - Each mutation commits its own unit of work
"""

import logging
from typing import Any, Mapping

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.book_filters import NoMatch, build_filters, ignored_keys
from app.core.errors import BookNotFoundError
from app.infrastructure.database import translate_db_errors
from app.models.book import Book

logger = logging.getLogger(__name__)


class BookStore:
    """CRUD operations over the books table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self, params: Mapping[str, str] | None = None) -> list[Book]:
        """All books, optionally narrowed by column equality filters."""
        params = params or {}
        skipped = ignored_keys(params)
        if skipped:
            logger.debug(f"Ignoring unknown filter keys: {', '.join(skipped)}")

        filters = build_filters(params)
        if isinstance(filters, NoMatch):
            return []

        columns = Book.__table__.c
        query = select(Book).where(
            *(columns[key] == value for key, value in filters.items()),
        )
        async with translate_db_errors(self.db, "select"):
            result = await self.db.execute(query)
        books = list(result.scalars().all())
        logger.debug(f"Listed {len(books)} books")
        return books

    async def find_one(self, isbn: str) -> Book:
        async with translate_db_errors(self.db, "select"):
            result = await self.db.execute(
                select(Book).where(Book.isbn == isbn),
            )
        book = result.scalar_one_or_none()
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    async def create(self, attributes: Mapping[str, Any]) -> Book:
        """Insert a book and return the stored row."""
        async with translate_db_errors(self.db, "insert"):
            result = await self.db.execute(
                insert(Book).values(**attributes).returning(Book),
            )
            book = result.scalar_one()
            await self.db.commit()
        logger.info("Book created", extra={"isbn": book.isbn})
        return book

    async def update(self, isbn: str, attributes: Mapping[str, Any]) -> Book:
        """Replace every column of the row keyed by isbn."""
        async with translate_db_errors(self.db, "update"):
            result = await self.db.execute(
                update(Book)
                .where(Book.isbn == isbn)
                .values(**attributes)
                .returning(Book),
            )
            book = result.scalar_one_or_none()
            if book is None:
                await self.db.rollback()
                raise BookNotFoundError(isbn)
            await self.db.commit()
        logger.info("Book updated", extra={"isbn": isbn})
        return book

    async def remove(self, isbn: str) -> None:
        async with translate_db_errors(self.db, "delete"):
            result = await self.db.execute(
                delete(Book).where(Book.isbn == isbn).returning(Book.isbn),
            )
            deleted = result.scalar_one_or_none()
            if deleted is None:
                await self.db.rollback()
                raise BookNotFoundError(isbn)
            await self.db.commit()
        logger.info("Book deleted", extra={"isbn": isbn})
