from sqlmodel import SQLModel, Field

class AuthorCreate(SQLModel):
    """Payload for creating an author, and for replacing one on update."""
    name: str = Field(min_length=1, max_length=255)

class AuthorRead(SQLModel):
    id: int
    name: str
