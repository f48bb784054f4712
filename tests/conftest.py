"""Test config and shared fixtures."""
import pytest
from decimal import Decimal
from typing import AsyncGenerator, List
from httpx import AsyncClient, ASGITransport
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.database.sql_driver import SQLDriver
from framework.repository.unit_of_work import UnitOfWork
from apps.registry import repository_registry
from apps.authors.models import Author
from apps.genres.models import Genre
from apps.books.models import Book


# In-memory SQLite for tests (foreign keys enforced by SQLDriver)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session."""
    driver = SQLDriver(TEST_DATABASE_URL)
    await driver.create_all()

    async with driver.session_factory() as session:
        yield session
        await session.rollback()

    await driver.drop_all()
    await driver.disconnect()


@pytest.fixture
def uow(async_session: AsyncSession) -> UnitOfWork:
    """UnitOfWork over the test session with the application registry."""
    return UnitOfWork(session=async_session, registry=repository_registry)


@pytest.fixture
async def client(
    async_session: AsyncSession
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    from apps.dependencies import get_db

    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def sample_author(async_session: AsyncSession) -> Author:
    """Create sample author."""
    author = Author(name="John Doe")
    async_session.add(author)
    await async_session.commit()
    await async_session.refresh(author)
    return author


@pytest.fixture
async def sample_genre(async_session: AsyncSession) -> Genre:
    """Create sample genre."""
    genre = Genre(name="Fiction")
    async_session.add(genre)
    await async_session.commit()
    await async_session.refresh(genre)
    return genre


@pytest.fixture
async def sample_book(
    async_session: AsyncSession,
    sample_author: Author,
    sample_genre: Genre
) -> Book:
    """Create sample book."""
    book = Book(
        title="Fiction Book 1",
        price=Decimal("12.50"),
        quantity_available=4,
        author_id=sample_author.id,
        genre_id=sample_genre.id
    )
    async_session.add(book)
    await async_session.commit()
    await async_session.refresh(book)
    return book


@pytest.fixture
async def catalog(async_session: AsyncSession) -> List[Book]:
    """
    Three-book catalog used by the search tests:
    Fiction Book 1 / John Doe / Fiction, Fiction Book 2 / Jane Doe / Fiction,
    Non-Fiction Book 1 / John Doe / Non-Fiction.
    """
    john = Author(name="John Doe")
    jane = Author(name="Jane Doe")
    fiction = Genre(name="Fiction")
    non_fiction = Genre(name="Non-Fiction")
    async_session.add_all([john, jane, fiction, non_fiction])
    await async_session.commit()

    books = [
        Book(title="Fiction Book 1", price=Decimal("10.00"), quantity_available=3,
             author_id=john.id, genre_id=fiction.id),
        Book(title="Fiction Book 2", price=Decimal("15.00"), quantity_available=1,
             author_id=jane.id, genre_id=fiction.id),
        Book(title="Non-Fiction Book 1", price=Decimal("20.00"), quantity_available=7,
             author_id=john.id, genre_id=non_fiction.id),
    ]
    async_session.add_all(books)
    await async_session.commit()
    for book in books:
        await async_session.refresh(book)
    return books


@pytest.fixture(autouse=True)
async def cleanup_test_data(async_session: AsyncSession, request):
    """
    Fixture to auto-cleanup test data.

    Cleans test data after each test. Disable with pytest option --no-cleanup.
    """
    yield

    if request.config.getoption("--no-cleanup", default=False):
        return

    try:
        from sqlmodel import delete

        await async_session.execute(delete(Book))
        await async_session.execute(delete(Author))
        await async_session.execute(delete(Genre))
        await async_session.commit()
    except Exception as e:
        await async_session.rollback()
        # In test env, cleanup failure should not fail the test
        print(f"Warning: Error during test data cleanup: {e}")


def pytest_addoption(parser):
    """Add pytest command-line options."""
    parser.addoption(
        "--no-cleanup",
        action="store_true",
        default=False,
        help="Disable auto-cleanup of test data"
    )
