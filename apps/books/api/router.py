from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ...dependencies import get_uow
from ..models import Book
from ..schemas import BookCreate, BookRead, BookReadWithRelations
from ..service import BookService

router = APIRouter()

def get_book_service(uow: UnitOfWork = Depends(get_uow)) -> BookService:
    """Dependency: create BookService."""
    return BookService(uow)

@router.get("")
async def list_books(
    title: Optional[str] = Query(default=None, description="Substring of the title"),
    author_name: Optional[str] = Query(default=None, description="Substring of the author's name"),
    genre_name: Optional[str] = Query(default=None, description="Substring of the genre name"),
    service: BookService = Depends(get_book_service)
):
    """List books, narrowed by every non-empty search parameter (case-insensitive)."""
    books = await service.search(title=title, author_name=author_name, genre_name=genre_name)
    return ResponseModel.success(data=[BookReadWithRelations.model_validate(b) for b in books])

@router.get("/{book_id}")
async def get_book(book_id: int, service: BookService = Depends(get_book_service)):
    book = await service.get(book_id)
    return ResponseModel.success(data=BookRead.model_validate(book))

@router.post("", status_code=status.HTTP_201_CREATED)
async def add_book(payload: BookCreate, service: BookService = Depends(get_book_service)):
    book = await service.add(Book.model_validate(payload))
    return ResponseModel.success(data=BookRead.model_validate(book), code=201, message="created")

@router.put("/{book_id}")
async def update_book(
    book_id: int,
    payload: BookCreate,
    service: BookService = Depends(get_book_service)
):
    """Replace every field of the book; the id comes from the path."""
    book = await service.update(Book.model_validate(payload, update={"id": book_id}))
    return ResponseModel.success(data=BookRead.model_validate(book))

@router.delete("/{book_id}")
async def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    await service.delete(book_id)
    return ResponseModel.success(data={"id": book_id})
