"""
Top-level router.

Aggregates the domain routers.  Records are served under ``/records``
and the liveness probe under ``/health``.
"""

from fastapi import APIRouter

from .endpoints import health, records

router = APIRouter()

router.include_router(records.router, prefix="/records", tags=["records"])
router.include_router(health.router, tags=["health"])
