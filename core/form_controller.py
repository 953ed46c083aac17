# core/form_controller.py

"""
The Form Controller owns the single add/edit form.

The form is a two-state machine:

- `CreateMode` (initial): submitting creates a new student.
- `EditMode(student_id)`: submitting updates that student.

Fields are cleared whenever the mode changes. Entering edit mode then pre-fills them
from the selected record. The controller never talks to the network; the Request
Orchestrator reads `mode` to decide which call a submit issues, and calls `reset()`
once that call succeeds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from core.response import ErrorCode, Response
from core.session import VALIDATION_MESSAGE
from models.student import Student, StudentId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateMode:
    pass


@dataclass(frozen=True)
class EditMode:
    student_id: StudentId


FormMode = Union[CreateMode, EditMode]


class FormController:

    def __init__(self):
        self._name: str = ""
        self._email: str = ""
        self._mode: FormMode = CreateMode()

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return isinstance(self._mode, EditMode)

    @property
    def editing_id(self) -> StudentId | None:
        return self._mode.student_id if isinstance(self._mode, EditMode) else None

    # === field input ===

    def set_name(self, name: str) -> None:
        self._name = name

    def set_email(self, email: str) -> None:
        self._email = email

    # === transitions ===

    def begin_edit(self, student: Student) -> None:
        """
        Switches to `EditMode` for `student` and pre-fills both fields.

        Args:
            student (Student): The record selected for editing.

        Notes:
            - Allowed from either mode. Unsaved input for a previous record is discarded.
        """
        self._clear_fields()
        self._mode = EditMode(student.id)
        self._name = student.name
        self._email = student.email

        logger.debug("Editing student %s", student.id)

    def cancel(self) -> Response:
        if not self.is_editing:
            return Response.fail(
                detail="There is no edit in progress to cancel.",
                error=ErrorCode.INVALID_STATE,
            )

        self.reset()

        return Response.succeed(detail="Edit cancelled.")

    def reset(self) -> None:
        self._clear_fields()
        self._mode = CreateMode()

    def validate(self) -> Response:
        """
        Checks that both fields hold something other than whitespace.

        Returns:
            Response: On success, data holds the "name" and "email" to submit. On failure, `ErrorCode.MISSING_REQUIRED_FIELD` with the validation message.

        Notes:
            - Email format is not checked; the service is the authority on that.
        """
        if not self._name.strip() or not self._email.strip():
            return Response.fail(
                detail=VALIDATION_MESSAGE,
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        return Response.succeed(data={"name": self._name, "email": self._email})

    # === helpers ===

    def _clear_fields(self) -> None:
        self._name = ""
        self._email = ""
