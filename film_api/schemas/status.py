"""Pydantic schemas for the status and error responses."""

from typing import Literal

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Response body for the liveness endpoint."""

    ok: Literal[True] = True
    service: str = Field(description="Service name (SERVICE_NAME)")


class ErrorResponse(BaseModel):
    """Shape of every error body returned by the API."""

    error: str
