"""Genre repository implementation."""

from framework.repository.base import BaseRepository
from .models import Genre


class GenreRepository(BaseRepository[Genre]):
    """Genre repository."""

    def __init__(self, session):
        super().__init__(session, Genre)
