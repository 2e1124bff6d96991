"""Movie catalog operations. Reads join the directors table; writes are single statements."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from film_api.core.errors import NotFoundError, ValidationError
from film_api.models import Director, Movie
from film_api.schemas.movies import MovieRequest, MovieResponse

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "Movie not found"


def _movie_query(db: Session) -> Query:
    return db.query(
        Movie.id,
        Movie.title,
        Movie.year,
        Director.id.label("director_id"),
        Director.name.label("director_name"),
    ).outerjoin(Director, Movie.director_id == Director.id)


def _validate_body(body: MovieRequest) -> None:
    if not body.title or not body.title.strip() or body.director_id is None or body.year is None:
        raise ValidationError("title, director_id and year are required")
    if body.year <= 0 or body.director_id <= 0:
        raise ValidationError("director_id and year must be positive integers")


def list_movies(db: Session) -> list[MovieResponse]:
    """All movies ordered by id, each with its director name (or null)."""
    rows = _movie_query(db).order_by(Movie.id.asc()).all()
    return [MovieResponse(**row._asdict()) for row in rows]


def get_movie(db: Session, movie_id: int) -> MovieResponse:
    row = _movie_query(db).filter(Movie.id == movie_id).first()
    if row is None:
        raise NotFoundError(MOVIE_NOT_FOUND)
    return MovieResponse(**row._asdict())


def _commit_movie(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        # The only constraint a well-typed body can violate is the director FK.
        db.rollback()
        raise ValidationError("director_id does not reference an existing director") from e


def create_movie(db: Session, body: MovieRequest) -> MovieResponse:
    """Insert a movie and return it with the generated id."""
    _validate_body(body)
    movie = Movie(title=body.title.strip(), director_id=body.director_id, year=body.year)
    db.add(movie)
    _commit_movie(db)
    logger.info("Created movie id=%s", movie.id)
    return get_movie(db, movie.id)


def update_movie(db: Session, movie_id: int, body: MovieRequest) -> MovieResponse:
    """Replace title, director and year of an existing movie."""
    _validate_body(body)
    movie = db.query(Movie).filter(Movie.id == movie_id).first()
    if movie is None:
        raise NotFoundError(MOVIE_NOT_FOUND)
    movie.title = body.title.strip()
    movie.director_id = body.director_id
    movie.year = body.year
    _commit_movie(db)
    logger.info("Updated movie id=%s", movie_id)
    return get_movie(db, movie_id)


def delete_movie(db: Session, movie_id: int) -> None:
    deleted = db.query(Movie).filter(Movie.id == movie_id).delete(synchronize_session=False)
    if not deleted:
        db.rollback()
        raise NotFoundError(MOVIE_NOT_FOUND)
    db.commit()
    logger.info("Deleted movie id=%s", movie_id)
