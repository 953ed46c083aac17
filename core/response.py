# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # === Validation Failures ===
    # a required form field is empty
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # === Remote Failures ===
    # the list call failed or returned an unusable payload
    LOAD_FAILED = "LOAD_FAILED"

    # a create, update, or delete call failed
    MUTATION_FAILED = "MUTATION_FAILED"

    # === State Restrictions ===
    # another request chain is still in flight
    BUSY = "BUSY"

    # the user declined a confirmation prompt
    CANCELLED = "CANCELLED"

    # the action does not apply in the current form mode
    INVALID_STATE = "INVALID_STATE"


class Response:
    """
    Standard Response object for store, form, and orchestrator operations.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | None): Optional machine-readable error identifier.
        status_code (int | None): HTTP status of the remote call, when one was made and answered.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return (
            f"Response(success={self._success}, error={self._error}, "
            f"detail={self._detail!r}, status_code={self._status_code})"
        )

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"

        error_str = self.error.value if self.error is not None else ""
        return f"Error: {error_str}"
