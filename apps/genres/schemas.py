from sqlmodel import SQLModel, Field

class GenreCreate(SQLModel):
    """Payload for creating a genre, and for replacing one on update."""
    name: str = Field(min_length=1, max_length=255)

class GenreRead(SQLModel):
    id: int
    name: str
