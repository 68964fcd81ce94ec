"""Person Directory API client.

This module defines a small client wrapper around the Person Directory
HTTP service.  The client uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`welcome` – fetch the greeting served at ``/``.
* :meth:`list_persons` – return every stored person.
* :meth:`get_person` – fetch a single person by its identifier.
* :meth:`create_person` – create a person and return it with its new id.
* :meth:`update_person` – rename an existing person.
* :meth:`delete_person` – delete a person.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  ``status_code`` is
``None`` when the server could not be reached at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PersonDirectoryClient:
    """Client for interacting with the Person Directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3333``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, expect_json: bool = True
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/persons``).
            json_body: JSON body to send with the request.  When given,
                ``requests`` sets ``Content-Type: application/json``.
            expect_json: Parse the response body as JSON rather than
                returning it as text.
        Returns:
            A tuple ``(data, error)``.
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
            if not response.content:
                return None, None
            if expect_json:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def welcome(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the service greeting."""
        return self._request("GET", "/", expect_json=False)

    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all persons.

        Returns:
            A tuple ``(persons, error)``.  ``persons`` is empty on failure.
        """
        data, error = self._request("GET", "/persons")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_person(self, person_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single person by ID."""
        return self._request("GET", f"/persons/{person_id}")

    def create_person(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person.

        Returns:
            A tuple ``(person, error)``; ``person`` carries the id
            assigned by the server.
        """
        return self._request("POST", "/persons", json_body={"name": name})

    def update_person(self, person_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename a person."""
        return self._request("PUT", f"/persons/{person_id}", json_body={"name": name})

    def delete_person(self, person_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a person.

        Returns:
            A tuple ``(success, error)``.  The server reports success
            even when the person did not exist.
        """
        _, error = self._request("DELETE", f"/persons/{person_id}")
        if error:
            return False, error
        return True, None
