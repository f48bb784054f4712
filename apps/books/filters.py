"""
Search criteria for the book catalog.

Each helper narrows a select over Book (already joined with Author and Genre) by
case-insensitive substring match, and returns the statement untouched when the
criterion is empty.
"""

from typing import Optional
from sqlmodel import col
from sqlmodel.sql.expression import SelectOfScalar
from ..authors.models import Author
from ..genres.models import Genre
from .models import Book


def filter_by_title(statement: SelectOfScalar[Book], title: Optional[str]) -> SelectOfScalar[Book]:
    if title:
        statement = statement.where(col(Book.title).icontains(title, autoescape=True))
    return statement


def filter_by_author_name(statement: SelectOfScalar[Book], author_name: Optional[str]) -> SelectOfScalar[Book]:
    if author_name:
        statement = statement.where(col(Author.name).icontains(author_name, autoescape=True))
    return statement


def filter_by_genre_name(statement: SelectOfScalar[Book], genre_name: Optional[str]) -> SelectOfScalar[Book]:
    if genre_name:
        statement = statement.where(col(Genre.name).icontains(genre_name, autoescape=True))
    return statement
