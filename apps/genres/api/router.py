from fastapi import APIRouter, Depends, status
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ...dependencies import get_uow
from ..models import Genre
from ..schemas import GenreCreate, GenreRead
from ..service import GenreService

router = APIRouter()

def get_genre_service(uow: UnitOfWork = Depends(get_uow)) -> GenreService:
    """Dependency: create GenreService."""
    return GenreService(uow)

@router.get("")
async def list_genres(service: GenreService = Depends(get_genre_service)):
    """List all genres."""
    genres = await service.list()
    return ResponseModel.success(data=[GenreRead.model_validate(g) for g in genres])

@router.get("/{genre_id}")
async def get_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    genre = await service.get(genre_id)
    return ResponseModel.success(data=GenreRead.model_validate(genre))

@router.post("", status_code=status.HTTP_201_CREATED)
async def add_genre(payload: GenreCreate, service: GenreService = Depends(get_genre_service)):
    genre = await service.add(Genre.model_validate(payload))
    return ResponseModel.success(data=GenreRead.model_validate(genre), code=201, message="created")

@router.put("/{genre_id}")
async def update_genre(
    genre_id: int,
    payload: GenreCreate,
    service: GenreService = Depends(get_genre_service)
):
    """Replace the genre; the id comes from the path."""
    genre = await service.update(Genre.model_validate(payload, update={"id": genre_id}))
    return ResponseModel.success(data=GenreRead.model_validate(genre))

@router.delete("/{genre_id}")
async def delete_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    """Delete the genre and, by cascade, all books filed under it."""
    await service.delete(genre_id)
    return ResponseModel.success(data={"id": genre_id})
