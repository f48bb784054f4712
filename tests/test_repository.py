"""Generic repository test cases against the in-memory store."""
import pytest
from decimal import Decimal
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.repository.unit_of_work import UnitOfWork
from apps.authors.models import Author
from apps.authors.repository import AuthorRepository
from apps.genres.models import Genre
from apps.genres.repository import GenreRepository
from apps.books.models import Book
from apps.books.repository import BookRepository


class TestBaseRepository:

    @pytest.mark.asyncio
    async def test_get_all(self, uow: UnitOfWork, sample_author: Author):
        authors = await uow.get_repository(AuthorRepository).get_all()
        assert [a.name for a in authors] == ["John Doe"]

    @pytest.mark.asyncio
    async def test_get_by_id(self, uow: UnitOfWork, sample_genre: Genre):
        genre = await uow.get_repository(GenreRepository).get_by_id(sample_genre.id)
        assert genre is not None
        assert genre.id == sample_genre.id
        assert genre.name == "Fiction"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, uow: UnitOfWork):
        assert await uow.get_repository(GenreRepository).get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_add_assigns_id_on_save(self, uow: UnitOfWork):
        repo = uow.get_repository(AuthorRepository)
        author = await repo.add(Author(name="Ursula K. Le Guin"))
        assert author.id is None

        await uow.save()

        assert author.id is not None
        assert (await repo.get_by_id(author.id)).name == "Ursula K. Le Guin"

    @pytest.mark.asyncio
    async def test_update_overwrites_every_field(
        self,
        uow: UnitOfWork,
        async_session: AsyncSession,
        sample_book: Book
    ):
        other_author = Author(name="Jane Doe")
        async_session.add(other_author)
        await async_session.commit()

        replacement = Book(
            id=sample_book.id,
            title="Renamed",
            price=Decimal("99.99"),
            quantity_available=0,
            author_id=other_author.id,
            genre_id=sample_book.genre_id
        )
        repo = uow.get_repository(BookRepository)
        await repo.update(replacement)
        await uow.save()
        await uow.close()

        stored = (await async_session.exec(select(Book).where(Book.id == sample_book.id))).one()
        assert stored.title == "Renamed"
        assert stored.price == Decimal("99.99")
        assert stored.quantity_available == 0
        assert stored.author_id == other_author.id

    @pytest.mark.asyncio
    async def test_remove_existing(self, uow: UnitOfWork, sample_genre: Genre):
        repo = uow.get_repository(GenreRepository)

        assert await repo.remove(sample_genre.id) is True
        await uow.save()

        assert await repo.get_by_id(sample_genre.id) is None

    @pytest.mark.asyncio
    async def test_remove_missing_is_noop(self, uow: UnitOfWork, sample_genre: Genre):
        repo = uow.get_repository(GenreRepository)

        assert await repo.remove(12345) is False
        assert await uow.save() == 0
        assert len(await repo.get_all()) == 1


class TestCascadeDelete:

    @pytest.mark.asyncio
    async def test_deleting_author_removes_books(self, uow: UnitOfWork, catalog):
        john_id = catalog[0].author_id

        await uow.get_repository(AuthorRepository).remove(john_id)
        await uow.save()

        remaining = await uow.get_repository(BookRepository).get_all()
        assert [b.title for b in remaining] == ["Fiction Book 2"]

    @pytest.mark.asyncio
    async def test_deleting_genre_removes_books(self, uow: UnitOfWork, catalog):
        fiction_id = catalog[0].genre_id

        await uow.get_repository(GenreRepository).remove(fiction_id)
        await uow.save()

        remaining = await uow.get_repository(BookRepository).get_all()
        assert [b.title for b in remaining] == ["Non-Fiction Book 1"]
        # Authors are untouched
        assert len(await uow.get_repository(AuthorRepository).get_all()) == 2
