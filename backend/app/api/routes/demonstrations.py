"""Demonstration Routes — run the narrated technique demonstrations over HTTP.

Invariants:
    - GET /api/v1/demonstrations runs all ten sections in order
    - Unknown section → 404 via DemonstrationNotFoundError
"""

from fastapi import APIRouter

from app.schemas.demonstration import DemonstrationReport
from app.services.demonstration_runner import (
    run_all_demonstrations, run_demonstration,
)

router = APIRouter(prefix="/api/v1/demonstrations", tags=["demonstrations"])


@router.get("", response_model=list[DemonstrationReport])
def list_demonstrations():
    return run_all_demonstrations()


@router.get("/{section}", response_model=DemonstrationReport)
def get_demonstration(section: int):
    return run_demonstration(section)
