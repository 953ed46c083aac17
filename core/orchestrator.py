# core/orchestrator.py

"""
The Request Orchestrator sequences every remote call the records client makes.

Each mutating action (create, update, delete) runs as one chain:

    Loading(kind) -> mutation call -> Loading(LOAD) -> reload -> settle

A failed mutation stops the chain before the reload and records an action-specific
message. A failed reload records the load-failure message. Either way the chain
settles with `loading` false, and no exception escapes this module.

The session's `loading` flag is the only gate against re-entrancy. Every entry point
checks it and moves into `Loading` with no `await` in between, so on a single event
loop at most one chain can be in flight. Triggers that arrive while a chain is
running have no effect and return `ErrorCode.BUSY`. Searching is never gated.
"""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Union

from core.client import ServiceError, StudentServiceClient
from core.form_controller import FormController
from core.list_filter import filter_students
from core.record_store import RecordStore
from core.response import ErrorCode, Response
from core.retry import NO_RETRY, RetryPolicy
from core.session import FAILURE_MESSAGES, VALIDATION_MESSAGE, ActionKind, Session
from models.student import Student, StudentId

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[StudentId], Union[bool, Awaitable[bool]]]

SUCCESS_MESSAGES: dict[ActionKind, str] = {
    ActionKind.LOAD: "Students loaded.",
    ActionKind.CREATE: "Student added.",
    ActionKind.UPDATE: "Student updated.",
    ActionKind.DELETE: "Student deleted.",
}


class RequestOrchestrator:

    def __init__(
        self,
        client: StudentServiceClient,
        store: RecordStore,
        form: FormController,
        session: Session,
        retry_policy: RetryPolicy = NO_RETRY,
    ):
        self._client = client
        self._store = store
        self._form = form
        self._session = session
        self._retry_policy = retry_policy
        self._mounted = False

    # === properties ===

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def form(self) -> FormController:
        return self._form

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_busy(self) -> bool:
        return self._session.loading

    @property
    def visible_students(self) -> list[Student]:
        return filter_students(self._store.students, self._session.search_term)

    # === reloads ===

    async def mount(self) -> Response:
        """
        Performs the initial load.

        Returns:
            Response: The reload response (see `RecordStore.reload()`), or `ErrorCode.INVALID_STATE` if already mounted.

        Notes:
            - The first call runs without checking the gate and keeps `loading` true until it resolves.
            - Later calls change nothing, so a chain already in flight keeps its `Loading` state.
        """
        if self._mounted:
            logger.debug("Ignored mount, initial load already started")
            return Response.fail(
                detail="Students are already mounted.",
                error=ErrorCode.INVALID_STATE,
            )

        self._mounted = True
        self._session.begin(ActionKind.LOAD)

        try:
            return await self._reload()
        finally:
            self._session.settle()

    async def refresh(self) -> Response:
        rejected = self._reject_if_busy("refresh")
        if rejected is not None:
            return rejected

        self._session.begin(ActionKind.LOAD)

        try:
            return await self._reload()
        finally:
            self._session.settle()

    # === mutations ===

    async def submit(self) -> Response:
        """
        Submits the form: creates in `CreateMode`, updates in `EditMode`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the mutation and the follow-up reload both succeeded.
                    - False otherwise.
                - detail (str | None):
                    - The message recorded in the session on failure, or a short confirmation on success.
                - error (ErrorCode | None):
                    - `ErrorCode.BUSY` if another chain is in flight (nothing else happens).
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if a field is empty (no network call is made).
                    - `ErrorCode.MUTATION_FAILED` if the create or update call failed.
                    - `ErrorCode.LOAD_FAILED` if the mutation succeeded but the reload failed.
                - data (dict): On a failed reload, "mutation_applied" is True.

        Notes:
            - On success the form returns to `CreateMode` with empty fields before the reload starts.
            - On failure the form keeps the user's input so the submit can be retried.
        """
        rejected = self._reject_if_busy("submit")
        if rejected is not None:
            return rejected

        kind = ActionKind.UPDATE if self._form.is_editing else ActionKind.CREATE

        validation = self._form.validate()

        if not validation.success:
            logger.info("Rejected %s with empty fields", kind.value)
            self._session.fail(kind, ErrorCode.MISSING_REQUIRED_FIELD, VALIDATION_MESSAGE)
            return validation

        name = validation.data["name"]
        email = validation.data["email"]
        student_id = self._form.editing_id

        if kind is ActionKind.UPDATE:

            async def call() -> None:
                await self._client.update_student(student_id, name, email)

        else:

            async def call() -> None:
                await self._client.create_student(name, email)

        return await self._run_chain(kind, call, on_success=self._form.reset)

    async def delete_student(
        self,
        student_id: StudentId,
        confirm: ConfirmCallback,
    ) -> Response:
        """
        Deletes a student after the user confirms.

        Args:
            student_id (StudentId): The id of the record to delete.
            confirm (ConfirmCallback): A yes/no gate, called with `student_id`. May return a bool or an awaitable bool.

        Returns:
            Response: As for `submit()`, with `ErrorCode.CANCELLED` if the user declines.

        Notes:
            - Declining makes no network call and changes no state.
            - The gate is checked both before and after confirmation.
        """
        rejected = self._reject_if_busy("delete")
        if rejected is not None:
            return rejected

        confirmed = confirm(student_id)
        if inspect.isawaitable(confirmed):
            confirmed = await confirmed

        if not confirmed:
            logger.debug("Delete of student %s declined", student_id)
            return Response.fail(detail="Delete cancelled.", error=ErrorCode.CANCELLED)

        rejected = self._reject_if_busy("delete")
        if rejected is not None:
            return rejected

        async def call() -> None:
            await self._client.delete_student(student_id)

        return await self._run_chain(ActionKind.DELETE, call)

    # === form transitions ===

    def begin_edit(self, student: Student) -> Response:
        rejected = self._reject_if_busy("edit")
        if rejected is not None:
            return rejected

        self._form.begin_edit(student)
        self._session.clear_error()

        return Response.succeed(data={"record": student})

    def cancel_edit(self) -> Response:
        rejected = self._reject_if_busy("cancel")
        if rejected is not None:
            return rejected

        form_response = self._form.cancel()

        if form_response.success:
            self._session.clear_error()

        return form_response

    def set_name(self, name: str) -> Response:
        rejected = self._reject_if_busy("name input")
        if rejected is not None:
            return rejected

        self._form.set_name(name)
        return Response.succeed()

    def set_email(self, email: str) -> Response:
        rejected = self._reject_if_busy("email input")
        if rejected is not None:
            return rejected

        self._form.set_email(email)
        return Response.succeed()

    def set_search_term(self, search_term: str) -> None:
        self._session.search_term = search_term

    # === helpers ===

    def _reject_if_busy(self, trigger: str) -> Response | None:
        if not self._session.loading:
            return None

        logger.debug(
            "Ignored %s while %s is in flight",
            trigger,
            self._session.loading_kind.value,
        )
        return Response.fail(
            detail="Another request is still in progress.",
            error=ErrorCode.BUSY,
        )

    async def _run_chain(
        self,
        kind: ActionKind,
        call: Callable[[], Awaitable[None]],
        on_success: Callable[[], None] | None = None,
    ) -> Response:
        self._session.begin(kind)

        try:
            try:
                await self._retry_policy.call(call)

            except ServiceError as e:
                logger.error("%s failed: %s", kind.value.capitalize(), e)
                self._session.fail(kind, ErrorCode.MUTATION_FAILED, FAILURE_MESSAGES[kind])

                return Response.fail(
                    detail=FAILURE_MESSAGES[kind],
                    error=ErrorCode.MUTATION_FAILED,
                    status_code=e.status_code,
                )

            logger.info("%s succeeded, reloading", kind.value.capitalize())

            if on_success is not None:
                on_success()

            self._session.begin(ActionKind.LOAD)
            reload_response = await self._reload()

            if not reload_response.success:
                # the mutation did apply, only the refresh failed
                return Response.fail(
                    detail=reload_response.detail,
                    error=reload_response.error,
                    status_code=reload_response.status_code,
                    data={"mutation_applied": True},
                )

            return Response.succeed(
                detail=SUCCESS_MESSAGES[kind],
                data=reload_response.data,
            )

        finally:
            self._session.settle()

    async def _reload(self) -> Response:
        store_response = await self._store.reload()

        if not store_response.success:
            self._session.fail(
                ActionKind.LOAD,
                ErrorCode.LOAD_FAILED,
                store_response.detail or FAILURE_MESSAGES[ActionKind.LOAD],
            )

        return store_response
