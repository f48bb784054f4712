"""
Model registration for migrations: import all models that should be migrated by Alembic here.
alembic/env.py reads SQLModel.metadata after importing this module.
"""
from apps.authors.models import Author
from apps.genres.models import Genre
from apps.books.models import Book

__all__ = ["Author", "Genre", "Book"]
