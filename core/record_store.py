# core/record_store.py

"""
The Record Store holds the local copy of the student collection.

The store is refreshed wholesale: every successful reload replaces the entire
sequence with the list response, in the order the service returned it. A failed
reload leaves the previous sequence untouched. The store never merges, patches, or
reorders records, and it never manages the loading flag; the Request Orchestrator
brackets every reload.
"""

from __future__ import annotations

import logging

from core.client import ServiceError, StudentServiceClient
from core.response import ErrorCode, Response
from core.retry import NO_RETRY, RetryPolicy
from core.session import FAILURE_MESSAGES, ActionKind
from models.student import Student, StudentId

logger = logging.getLogger(__name__)


class RecordStore:

    def __init__(
        self,
        client: StudentServiceClient,
        retry_policy: RetryPolicy = NO_RETRY,
    ):
        self._client = client
        self._retry_policy = retry_policy
        self._students: tuple[Student, ...] = ()

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        return self._students

    @property
    def is_empty(self) -> bool:
        return not self._students

    # === reload ===

    async def reload(self) -> Response:
        """
        Replaces the local sequence with the service's current collection.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the list call succeeded and the store was replaced.
                    - False if the call failed; the previous sequence is kept.
                - detail (str | None):
                    - On failure, the load-failure message shown to the user.
                - error (ErrorCode | None):
                    - `ErrorCode.LOAD_FAILED` on failure.
                - status_code (int | None):
                    - The HTTP status of a rejected list call, if any.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "students" (tuple[Student, ...]): The new sequence.

        Notes:
            - The session's error slot is not touched here; the orchestrator applies this response to it.
        """
        try:
            students = await self._retry_policy.call(self._client.list_students)

        except ServiceError as e:
            logger.error("Reload failed, keeping %d cached students: %s", len(self._students), e)
            return Response.fail(
                detail=FAILURE_MESSAGES[ActionKind.LOAD],
                error=ErrorCode.LOAD_FAILED,
                status_code=e.status_code,
            )

        self._students = tuple(students)
        logger.debug("Reloaded %d students", len(self._students))

        return Response.succeed(data={"students": self._students})

    # === data accessors ===

    def find_student_by_id(self, student_id: StudentId) -> Response:
        """
        Looks up a cached student by its service-assigned id.

        Args:
            student_id (StudentId): The id to look for.

        Returns:
            Response: On success, data["record"] holds the `Student`. On failure, `ErrorCode.NOT_FOUND`.

        Notes:
            - The lookup only searches the local sequence and makes no network call.
        """
        for student in self._students:
            if student.id == student_id:
                return Response.succeed(data={"record": student})

        return Response.fail(
            detail=f"No student with id {student_id} is loaded.",
            error=ErrorCode.NOT_FOUND,
        )
