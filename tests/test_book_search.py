"""Book catalog search test cases (repository filter and HTTP endpoint)."""
import pytest
from httpx import AsyncClient
from framework.repository.unit_of_work import UnitOfWork
from apps.books.repository import BookRepository


def titles(books):
    return sorted(b.title for b in books)


class TestGetFiltered:

    @pytest.mark.asyncio
    async def test_no_criteria_returns_everything(self, uow: UnitOfWork, catalog):
        books = await uow.get_repository(BookRepository).get_filtered()
        assert len(books) == 3

    @pytest.mark.asyncio
    async def test_empty_strings_are_not_applied(self, uow: UnitOfWork, catalog):
        books = await uow.get_repository(BookRepository).get_filtered("", "", "")
        assert len(books) == 3

    @pytest.mark.asyncio
    async def test_title_substring_is_case_insensitive(self, uow: UnitOfWork, catalog):
        books = await uow.get_repository(BookRepository).get_filtered(title="fiction book")
        # "Non-Fiction Book 1" contains it too
        assert len(books) == 3

        books = await uow.get_repository(BookRepository).get_filtered(title="NON-")
        assert titles(books) == ["Non-Fiction Book 1"]

    @pytest.mark.asyncio
    async def test_single_author_criterion(self, uow: UnitOfWork, catalog):
        books = await uow.get_repository(BookRepository).get_filtered(author_name="John Doe")
        assert titles(books) == ["Fiction Book 1", "Non-Fiction Book 1"]

    @pytest.mark.asyncio
    async def test_all_criteria_are_anded(self, uow: UnitOfWork, catalog):
        repo = uow.get_repository(BookRepository)

        books = await repo.get_filtered("fiction book", "jane", "fiction")
        assert titles(books) == ["Fiction Book 2"]

        books = await repo.get_filtered("Book", "John Doe", "Non-Fiction")
        assert titles(books) == ["Non-Fiction Book 1"]

        assert await repo.get_filtered("Book 2", "John", "Fiction") == []

    @pytest.mark.asyncio
    async def test_relations_are_loaded(self, uow: UnitOfWork, catalog):
        books = await uow.get_repository(BookRepository).get_filtered(genre_name="non")
        assert len(books) == 1
        assert books[0].author.name == "John Doe"
        assert books[0].genre.name == "Non-Fiction"

    @pytest.mark.asyncio
    async def test_like_wildcards_are_literal(self, uow: UnitOfWork, catalog):
        assert await uow.get_repository(BookRepository).get_filtered(title="%") == []
        assert await uow.get_repository(BookRepository).get_filtered(title="_") == []


class TestSearchEndpoint:

    @pytest.mark.asyncio
    async def test_list_without_params(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/books")

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 3
        assert {"author", "genre"} <= set(data[0])

    @pytest.mark.asyncio
    async def test_title_only(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/books", params={"title": "Fiction Book"})
        assert len(response.json()["data"]) == 3

    @pytest.mark.asyncio
    async def test_author_only_filters(self, client: AsyncClient, catalog):
        response = await client.get(
            "/api/v1/books",
            params={"title": "", "author_name": "John Doe", "genre_name": ""}
        )
        data = response.json()["data"]
        assert sorted(b["title"] for b in data) == ["Fiction Book 1", "Non-Fiction Book 1"]
        assert all(b["author"]["name"] == "John Doe" for b in data)

    @pytest.mark.asyncio
    async def test_all_three_criteria(self, client: AsyncClient, catalog):
        response = await client.get(
            "/api/v1/books",
            params={"title": "fiction", "author_name": "doe", "genre_name": "non-fiction"}
        )
        data = response.json()["data"]
        assert [b["title"] for b in data] == ["Non-Fiction Book 1"]
        assert data[0]["genre"]["name"] == "Non-Fiction"
