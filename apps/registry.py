"""
Repository registrations, resolved by every request's UnitOfWork.
When adding an app, register its repositories here.
"""
from framework.repository.registry import RepositoryRegistry
from apps.authors.repository import AuthorRepository
from apps.genres.repository import GenreRepository
from apps.books.repository import BookRepository

repository_registry = RepositoryRegistry()
repository_registry.register(AuthorRepository)
repository_registry.register(GenreRepository)
repository_registry.register(BookRepository)
