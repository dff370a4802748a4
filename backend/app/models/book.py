"""Book ORM — the single catalog entity, keyed by ISBN.

Invariants:
    - isbn is the primary key and never changes after insert
    - Every column is non-nullable: the API only persists complete records
    - pages and year are integers; everything else is text
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Book(Base):
    """Catalog book row."""
    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(Text, primary_key=True)
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
