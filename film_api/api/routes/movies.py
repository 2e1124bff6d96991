"""Movie endpoints: public reads, authenticated create, admin update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from film_api.api.routes.auth import get_current_user, require_admin
from film_api.core.database import get_db
from film_api.schemas.auth import CurrentUser
from film_api.schemas.movies import MovieRequest, MovieResponse
from film_api.services import movies

router = APIRouter()


@router.get("", response_model=list[MovieResponse])
def list_movies(
    db: Annotated[Session, Depends(get_db)],
) -> list[MovieResponse]:
    """Return every movie ordered by id, with director name when set."""
    return movies.list_movies(db)


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MovieResponse:
    return movies.get_movie(db, movie_id)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    body: MovieRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MovieResponse:
    """Create a movie. Any authenticated user may do this."""
    return movies.create_movie(db, body)


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: int,
    body: MovieRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MovieResponse:
    """Replace a movie's title, director and year (admin only)."""
    return movies.update_movie(db, movie_id, body)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    movie_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    """Delete a movie (admin only). Responds 204 with an empty body."""
    movies.delete_movie(db, movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
