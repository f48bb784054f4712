from framework.service import CrudService
from .models import Genre
from .repository import GenreRepository


class GenreService(CrudService[Genre]):
    """Genre service."""

    entity_name = "Genre"
    repository_class = GenreRepository
