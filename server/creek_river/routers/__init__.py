"""FastAPI routers package."""

from .campsites import router as campsites_router
from .health import router as health_router
from .metrics import router as metrics_router
from .reference import router as reference_router
from .reservations import router as reservations_router

__all__ = [
    "campsites_router",
    "health_router",
    "metrics_router",
    "reference_router",
    "reservations_router",
]
