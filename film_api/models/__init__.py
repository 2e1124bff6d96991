"""SQLAlchemy ORM models."""

from film_api.models.base import Base
from film_api.models.director import Director
from film_api.models.movie import Movie
from film_api.models.user import User

__all__ = ["Base", "Director", "Movie", "User"]
