"""ORM model for film directors."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from film_api.models.base import Base


class Director(Base):
    __tablename__ = "directors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    birth_year = Column(Integer, nullable=True)

    movies = relationship("Movie", back_populates="director", passive_deletes=True)
