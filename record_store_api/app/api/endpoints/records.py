"""
Record endpoints.

These routes expose the CRUD API over the in-memory collection.  Ids in
the path are matched against the first record carrying that id.  An
unknown id raises ``RecordNotFoundError`` in the service, which the
application answers with a 404 body ``{"id": N, "err": "record not found"}``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from record_store_api.app.api.deps import get_store
from record_store_api.app.schemas.record import U32_MAX, Record, RecordNotFound
from record_store_api.app.services.record_service import RecordStore

router = APIRouter()

_not_found = {status.HTTP_404_NOT_FOUND: {"model": RecordNotFound}}


@router.post("", response_model=Record, status_code=status.HTTP_201_CREATED)
async def create_record(record_in: Record, store: RecordStore = Depends(get_store)) -> Record:
    """Append a record to the collection.

    The id is taken as given; an existing record with the same id is
    left in place.
    """
    return await store.create(record_in)


@router.get("", response_model=List[Record])
async def list_records(store: RecordStore = Depends(get_store)) -> List[Record]:
    """Return all records in collection order."""
    return await store.list()


@router.get("/{record_id}", response_model=Record, responses=_not_found)
async def get_record(
    record_id: int = Path(..., ge=0, le=U32_MAX),
    store: RecordStore = Depends(get_store),
) -> Record:
    """Retrieve the first record with the given id."""
    return await store.get(record_id)


@router.put("/{record_id}", response_model=Record, responses=_not_found)
async def update_record(
    record_in: Record,
    record_id: int = Path(..., ge=0, le=U32_MAX),
    store: RecordStore = Depends(get_store),
) -> Record:
    """Replace the first record with the given id.

    The stored value is the body as sent, including its ``id``, so a
    record can be renumbered through this call.
    """
    return await store.update(record_id, record_in)


@router.delete("/{record_id}", response_model=Record, responses=_not_found)
async def delete_record(
    record_id: int = Path(..., ge=0, le=U32_MAX),
    store: RecordStore = Depends(get_store),
) -> Record:
    """Remove the first record with the given id and return it."""
    return await store.delete(record_id)
