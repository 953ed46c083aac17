# core/client.py

"""
HTTP client for the remote student collection service.

Wraps a single `httpx.AsyncClient` and exposes the four verbs the records client
relies on:

- list   -> GET    /students
- create -> POST   /students
- update -> PUT    /students/{id}
- delete -> DELETE /students/{id}

Every failure (transport error, non-2xx status, or an undecodable list payload) is
raised as `ServiceError`. Callers never receive raw `httpx` exceptions. Bodies of
create, update, and delete responses are ignored; local state is always refreshed
through a follow-up list call.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from models.student import Student, StudentId

logger = logging.getLogger(__name__)

STUDENTS_PATH = "/students"


class ServiceError(Exception):
    """
    Raised when a call to the collection service does not succeed.

    Attributes:
        action (str): The verb that failed ("list", "create", "update", "delete").
        status_code (int | None): The HTTP status, if the service answered at all.
    """

    def __init__(self, action: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.action = action
        self.status_code = status_code


class StudentServiceClient:

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        # no timeout override: the transport's own defaults apply
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    # === lifecycle ===

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> StudentServiceClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # === verbs ===

    async def list_students(self) -> list[Student]:
        """
        Fetches the full collection.

        Returns:
            The records in the order the service returned them.

        Raises:
            ServiceError: If the request fails or the payload is not a list of records.
        """
        response = await self._send("list", "GET", STUDENTS_PATH)

        try:
            payload = response.json()
        except ValueError as e:
            raise ServiceError("list", f"Response body is not JSON: {e}") from e

        if not isinstance(payload, list):
            raise ServiceError(
                "list", f"Expected a JSON array, got {type(payload).__name__}"
            )

        try:
            return [Student.from_dict(entry) for entry in payload]
        except (KeyError, TypeError) as e:
            raise ServiceError("list", f"Malformed student record: {e!r}") from e

    async def create_student(self, name: str, email: str) -> None:
        await self._send(
            "create", "POST", STUDENTS_PATH, json=Student.to_payload(name, email)
        )

    async def update_student(self, student_id: StudentId, name: str, email: str) -> None:
        await self._send(
            "update",
            "PUT",
            self._record_path(student_id),
            json=Student.to_payload(name, email),
        )

    async def delete_student(self, student_id: StudentId) -> None:
        await self._send("delete", "DELETE", self._record_path(student_id))

    # === helpers ===

    @staticmethod
    def _record_path(student_id: StudentId) -> str:
        return f"{STUDENTS_PATH}/{student_id}"

    async def _send(
        self,
        action: str,
        method: str,
        path: str,
        json: dict | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)

        try:
            response = await self._http.request(method, path, json=json)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s %s failed with HTTP %s", method, path, e.response.status_code
            )
            raise ServiceError(
                action,
                f"HTTP error {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ServiceError(action, f"Request error: {e}") from e

        return response
