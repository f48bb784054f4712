from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..books.models import Book

class Genre(SQLModel, table=True):
    """Book genre; deleting a genre deletes all books filed under it."""
    __tablename__ = "genres"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, description="Genre name")

    books: List["Book"] = Relationship(
        back_populates="genre",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )
