"""Liveness endpoint."""

from fastapi import APIRouter

from film_api.core.config import settings
from film_api.schemas.status import StatusResponse

router = APIRouter()


@router.get("/status", response_model=StatusResponse)
def get_status() -> StatusResponse:
    """Return ok and the service name. Does not touch the database."""
    return StatusResponse(ok=True, service=settings.SERVICE_NAME)
