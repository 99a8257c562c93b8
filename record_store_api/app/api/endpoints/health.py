"""Liveness probe for process supervisors; never touches the record store."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def healthcheck() -> dict:
    """Report that the process is up and serving requests."""
    return {"status": "ok"}
