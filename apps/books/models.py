from sqlmodel import SQLModel, Field, Relationship
from typing import Optional
from decimal import Decimal
from ..authors.models import Author
from ..genres.models import Genre

class Book(SQLModel, table=True):
    """Catalog entry; always belongs to exactly one author and one genre."""
    __tablename__ = "books"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, index=True, description="Book title")
    price: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2, description="Unit price")
    quantity_available: int = Field(default=0, description="Copies in stock")

    author_id: int = Field(foreign_key="authors.id", ondelete="CASCADE", index=True)
    genre_id: int = Field(foreign_key="genres.id", ondelete="CASCADE", index=True)

    author: Optional[Author] = Relationship(back_populates="books")
    genre: Optional[Genre] = Relationship(back_populates="books")
