from decimal import Decimal
from sqlmodel import SQLModel, Field
from ..authors.schemas import AuthorRead
from ..genres.schemas import GenreRead

class BookCreate(SQLModel):
    """Payload for creating a book, and for replacing one on update (every field is overwritten)."""
    title: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    quantity_available: int = Field(ge=0)
    author_id: int
    genre_id: int

class BookRead(SQLModel):
    id: int
    title: str
    price: Decimal
    quantity_available: int
    author_id: int
    genre_id: int

class BookReadWithRelations(BookRead):
    author: AuthorRead
    genre: GenreRead
