"""ORM model for catalog movies."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from film_api.models.base import Base


class Movie(Base):
    """
    A movie in the catalog.

    director_id is nullable; deleting a director leaves its movies in place
    with the reference cleared (ON DELETE SET NULL).
    """

    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    director_id = Column(
        Integer,
        ForeignKey("directors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    director = relationship("Director", back_populates="movies")
