from __future__ import annotations

from fastapi import APIRouter

from ... import __version__
from ...schemas import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
def health() -> HealthStatus:
    return HealthStatus(status="ok", version=__version__)


__all__ = ["router"]
