from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..books.models import Book

class Author(SQLModel, table=True):
    """Book author; deleting an author deletes all of their books."""
    __tablename__ = "authors"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, description="Author display name")

    # Loaded children are deleted by the ORM, the rest by ON DELETE CASCADE in the store
    books: List["Book"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )
