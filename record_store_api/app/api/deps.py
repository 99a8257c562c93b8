"""Request dependencies shared by the endpoint modules."""

from fastapi import Request

from record_store_api.app.services.record_service import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the store owned by the application handling ``request``."""
    return request.app.state.store
