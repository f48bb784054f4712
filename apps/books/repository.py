"""Book repository implementation."""

from typing import Optional, List
from sqlalchemy.orm import selectinload
from sqlmodel import select, col
from framework.repository.base import BaseRepository
from ..authors.models import Author
from ..genres.models import Genre
from .filters import filter_by_title, filter_by_author_name, filter_by_genre_name
from .models import Book


class BookRepository(BaseRepository[Book]):
    """Book repository."""

    def __init__(self, session):
        super().__init__(session, Book)

    async def get_filtered(
        self,
        title: Optional[str] = None,
        author_name: Optional[str] = None,
        genre_name: Optional[str] = None
    ) -> List[Book]:
        """
        Books matching every non-empty criterion, with author and genre loaded.

        Args:
            title: Substring of the book title
            author_name: Substring of the author's name
            genre_name: Substring of the genre name

        Returns:
            New list of books; all books when every criterion is empty
        """
        statement = (
            select(Book)
            .join(Author, col(Book.author_id) == col(Author.id))
            .join(Genre, col(Book.genre_id) == col(Genre.id))
            .options(selectinload(Book.author), selectinload(Book.genre))
            .order_by(col(Book.id))
            .execution_options(populate_existing=True)
        )

        statement = filter_by_title(statement, title)
        statement = filter_by_author_name(statement, author_name)
        statement = filter_by_genre_name(statement, genre_name)

        result = await self.session.exec(statement)
        return list(result.all())
