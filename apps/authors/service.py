from framework.service import CrudService
from .models import Author
from .repository import AuthorRepository


class AuthorService(CrudService[Author]):
    """Author service."""

    entity_name = "Author"
    repository_class = AuthorRepository
