"""Director operations, following the same permission ladder as movies."""

import logging

from sqlalchemy.orm import Session

from film_api.core.errors import NotFoundError, ValidationError
from film_api.models import Director, Movie
from film_api.schemas.directors import DirectorRequest

logger = logging.getLogger(__name__)

DIRECTOR_NOT_FOUND = "Director not found"


def _validate_body(body: DirectorRequest) -> str:
    if not body.name or not body.name.strip():
        raise ValidationError("name is required")
    return body.name.strip()


def list_directors(db: Session) -> list[Director]:
    return db.query(Director).order_by(Director.id.asc()).all()


def get_director(db: Session, director_id: int) -> Director:
    director = db.query(Director).filter(Director.id == director_id).first()
    if director is None:
        raise NotFoundError(DIRECTOR_NOT_FOUND)
    return director


def create_director(db: Session, body: DirectorRequest) -> Director:
    director = Director(name=_validate_body(body), birth_year=body.birth_year)
    db.add(director)
    db.commit()
    db.refresh(director)
    logger.info("Created director id=%s", director.id)
    return director


def update_director(db: Session, director_id: int, body: DirectorRequest) -> Director:
    name = _validate_body(body)
    director = get_director(db, director_id)
    director.name = name
    director.birth_year = body.birth_year
    db.commit()
    db.refresh(director)
    logger.info("Updated director id=%s", director_id)
    return director


def delete_director(db: Session, director_id: int) -> None:
    """Delete a director; its movies stay in the catalog with director_id cleared."""
    director = get_director(db, director_id)
    # SQLite ignores ON DELETE SET NULL unless foreign_keys is enabled.
    db.query(Movie).filter(Movie.director_id == director_id).update(
        {Movie.director_id: None}, synchronize_session=False
    )
    db.delete(director)
    db.commit()
    logger.info("Deleted director id=%s", director_id)
