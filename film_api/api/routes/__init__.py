"""API routes."""

from fastapi import APIRouter

from film_api.api.routes import auth, directors, movies, status

router = APIRouter()
router.include_router(status.router, tags=["status"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(directors.router, prefix="/directors", tags=["directors"])
