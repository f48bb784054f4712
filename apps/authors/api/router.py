from fastapi import APIRouter, Depends, status
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ...dependencies import get_uow
from ..models import Author
from ..schemas import AuthorCreate, AuthorRead
from ..service import AuthorService

router = APIRouter()

def get_author_service(uow: UnitOfWork = Depends(get_uow)) -> AuthorService:
    """Dependency: create AuthorService."""
    return AuthorService(uow)

@router.get("")
async def list_authors(service: AuthorService = Depends(get_author_service)):
    """List all authors."""
    authors = await service.list()
    return ResponseModel.success(data=[AuthorRead.model_validate(a) for a in authors])

@router.get("/{author_id}")
async def get_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    author = await service.get(author_id)
    return ResponseModel.success(data=AuthorRead.model_validate(author))

@router.post("", status_code=status.HTTP_201_CREATED)
async def add_author(payload: AuthorCreate, service: AuthorService = Depends(get_author_service)):
    author = await service.add(Author.model_validate(payload))
    return ResponseModel.success(data=AuthorRead.model_validate(author), code=201, message="created")

@router.put("/{author_id}")
async def update_author(
    author_id: int,
    payload: AuthorCreate,
    service: AuthorService = Depends(get_author_service)
):
    """Replace the author; the id comes from the path."""
    author = await service.update(Author.model_validate(payload, update={"id": author_id}))
    return ResponseModel.success(data=AuthorRead.model_validate(author))

@router.delete("/{author_id}")
async def delete_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    """Delete the author and, by cascade, all of their books."""
    await service.delete(author_id)
    return ResponseModel.success(data={"id": author_id})
