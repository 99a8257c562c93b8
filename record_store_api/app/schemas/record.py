"""
Pydantic schemas for records.

A record is identified by a caller-supplied unsigned 32-bit ``id`` and
holds an ``author`` string.  The store does not generate ids and does
not enforce uniqueness, so several records may share an id.
"""

from pydantic import BaseModel, ConfigDict, Field

from record_store_api.app.core.errors import NOT_FOUND_MESSAGE

U32_MAX = 2**32 - 1


class Record(BaseModel):
    """Schema for a record, used both as request body and response."""

    # No coercion: "3", 3.0 and true are rejected rather than stored as ints.
    model_config = ConfigDict(strict=True)

    id: int = Field(..., ge=0, le=U32_MAX, description="Caller-supplied record identifier")
    author: str = Field(..., description="Author name, arbitrary text")


class RecordNotFound(BaseModel):
    """Body of the 404 response returned when no record matches an id."""

    id: int
    err: str = NOT_FOUND_MESSAGE
