from typing import Optional, List
from framework.exceptions.handler import ValidationException
from framework.service import CrudService
from ..authors.repository import AuthorRepository
from ..genres.repository import GenreRepository
from .models import Book
from .repository import BookRepository


class BookService(CrudService[Book]):
    """Book service (CRUD plus catalog search)."""

    entity_name = "Book"
    repository_class = BookRepository

    async def search(
        self,
        title: Optional[str] = None,
        author_name: Optional[str] = None,
        genre_name: Optional[str] = None
    ) -> List[Book]:
        """AND of every non-empty criterion; no criteria returns the whole catalog."""
        return await self.repository.get_filtered(title, author_name, genre_name)

    async def _validate(self, book: Book) -> None:
        author = await self.uow.get_repository(AuthorRepository).get_by_id(book.author_id)
        if author is None:
            raise ValidationException(
                f"Author with ID {book.author_id} does not exist",
                detail={"author_id": book.author_id}
            )
        genre = await self.uow.get_repository(GenreRepository).get_by_id(book.genre_id)
        if genre is None:
            raise ValidationException(
                f"Genre with ID {book.genre_id} does not exist",
                detail={"genre_id": book.genre_id}
            )
