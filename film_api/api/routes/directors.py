"""Director endpoints, gated like the movie endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from film_api.api.routes.auth import get_current_user, require_admin
from film_api.core.database import get_db
from film_api.schemas.auth import CurrentUser
from film_api.schemas.directors import DirectorRequest, DirectorResponse
from film_api.services import directors

router = APIRouter()


@router.get("", response_model=list[DirectorResponse])
def list_directors(
    db: Annotated[Session, Depends(get_db)],
) -> list[DirectorResponse]:
    return [DirectorResponse.model_validate(d) for d in directors.list_directors(db)]


@router.get("/{director_id}", response_model=DirectorResponse)
def get_director(
    director_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DirectorResponse:
    return DirectorResponse.model_validate(directors.get_director(db, director_id))


@router.post("", response_model=DirectorResponse, status_code=status.HTTP_201_CREATED)
def create_director(
    body: DirectorRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DirectorResponse:
    return DirectorResponse.model_validate(directors.create_director(db, body))


@router.put("/{director_id}", response_model=DirectorResponse)
def update_director(
    director_id: int,
    body: DirectorRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> DirectorResponse:
    return DirectorResponse.model_validate(directors.update_director(db, director_id, body))


@router.delete("/{director_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_director(
    director_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    """Delete a director (admin only); its movies keep existing without a director."""
    directors.delete_director(db, director_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
