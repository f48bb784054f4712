"""Author repository implementation."""

from framework.repository.base import BaseRepository
from .models import Author


class AuthorRepository(BaseRepository[Author]):
    """Author repository."""

    def __init__(self, session):
        super().__init__(session, Author)
