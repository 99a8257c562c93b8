"""
Domain errors raised by the service layer.

The store never knows about HTTP.  It raises ``RecordNotFoundError``
and the API layer turns it into a 404 response (see
``api/error_handlers.py``).
"""

NOT_FOUND_MESSAGE = "record not found"


class RecordNotFoundError(Exception):
    """No record in the collection carries the requested id."""

    def __init__(self, record_id: int, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(f"{message}: {record_id}")
        self.record_id = record_id
        self.message = message
