"""Request/response schemas for the director resource."""

from pydantic import BaseModel, Field


class DirectorRequest(BaseModel):
    name: str | None = Field(default=None, max_length=255)
    birth_year: int | None = Field(default=None, strict=True)


class DirectorResponse(BaseModel):
    id: int
    name: str
    birth_year: int | None = None

    model_config = {"from_attributes": True}
