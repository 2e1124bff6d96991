"""Request/response schemas for the movie resource."""

from pydantic import BaseModel, Field


class MovieRequest(BaseModel):
    """Body for create and update. Presence of every field is checked by the service."""

    title: str | None = Field(default=None, max_length=255)
    # strict: JSON booleans and numeric strings are not accepted as integers
    director_id: int | None = Field(default=None, strict=True)
    year: int | None = Field(default=None, strict=True)


class MovieResponse(BaseModel):
    """Movie joined with its director; director fields are null when unset."""

    id: int
    title: str
    year: int
    director_id: int | None = None
    director_name: str | None = None
