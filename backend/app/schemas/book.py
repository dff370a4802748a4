"""Book Schemas — Pydantic models for the /books API boundary.

Invariants:
    - BookPayload is strict: "320" is not an integer, 264.0 is not an integer
    - BookPayload forbids additional properties
    - All eight fields are required on create and update (full replacement)

Design Decisions:
    - strict=True over custom validators: Pydantic rejects coercion natively and
      reports every violation in one pass
    - Response envelopes as models: the OpenAPI document shows {book}/{books}/{message}
"""

from pydantic import BaseModel, ConfigDict


class BookPayload(BaseModel):
    """Request body for POST /books and PUT /books/{isbn}."""
    model_config = ConfigDict(strict=True, extra="forbid")

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookOut(BaseModel):
    """Book as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookResponse(BaseModel):
    book: BookOut


class BookListResponse(BaseModel):
    books: list[BookOut]


class MessageResponse(BaseModel):
    message: str
