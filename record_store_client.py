"""Record Store API client.

A thin wrapper around the HTTP API served by ``record_store_api``.  The
client uses the ``requests`` library and exposes one method per
endpoint:

* :meth:`RecordStoreClient.create_record` – ``POST /records``
* :meth:`RecordStoreClient.list_records` – ``GET /records``
* :meth:`RecordStoreClient.get_record` – ``GET /records/{id}``
* :meth:`RecordStoreClient.update_record` – ``PUT /records/{id}``
* :meth:`RecordStoreClient.delete_record` – ``DELETE /records/{id}``

Every method returns a tuple ``(data, error)``.  On success ``data`` is
the decoded JSON body and ``error`` is ``None``.  On failure ``data``
is ``None`` (or an empty list for :meth:`list_records`) and ``error``
is a dictionary with ``status_code``, ``message`` and, for 404
responses, the ``id`` echoed by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecordStoreClient:
    """Client for the record store HTTP API."""

    def __init__(
        self,
        *,
        base_url: str = "http://127.0.0.1:8000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, without a trailing path.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        error: Error = {"status_code": status, "message": str(exc)}
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                error["message"] = body.get("err") or str(body)
                if "id" in body:
                    error["id"] = body["id"]
            elif response.text:
                error["message"] = response.text
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def create_record(self, record_id: int, author: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record with the given id and author."""
        return self._request("POST", "/records", json_body={"id": record_id, "author": author})

    def list_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every record in collection order."""
        data, error = self._request("GET", "/records")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_record(self, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the first record with ``record_id``."""
        return self._request("GET", f"/records/{record_id}")

    def update_record(
        self, record_id: int, new_id: int, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the record addressed by ``record_id``.

        The stored record takes ``new_id`` as its id; pass ``record_id``
        again to keep the id unchanged.
        """
        return self._request("PUT", f"/records/{record_id}", json_body={"id": new_id, "author": author})

    def delete_record(self, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete the first record with ``record_id`` and return it."""
        return self._request("DELETE", f"/records/{record_id}")
