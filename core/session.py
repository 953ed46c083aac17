# core/session.py

"""
Session flags for the records client.

The request lifecycle is held in a single tagged union rather than separate
`loading` and `error` variables:

- `Idle`: nothing in flight, no message to show
- `Loading(kind)`: a remote call chain is in flight
- `Errored(kind, code, message)`: the last attempt failed

`loading` and `error` are derived from whichever variant is current, so a request
in flight can never coexist with a message left over from an earlier attempt.
The search term is orthogonal to the request lifecycle and lives alongside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from core.response import ErrorCode


class ActionKind(str, Enum):
    LOAD = "load"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


VALIDATION_MESSAGE = "Please fill all fields"

FAILURE_MESSAGES: dict[ActionKind, str] = {
    ActionKind.LOAD: "Failed to load students. Please check if the server is running.",
    ActionKind.CREATE: "Failed to add student",
    ActionKind.UPDATE: "Failed to update student",
    ActionKind.DELETE: "Failed to delete student",
}


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    kind: ActionKind


@dataclass(frozen=True)
class Errored:
    kind: ActionKind
    code: ErrorCode
    message: str


SessionState = Union[Idle, Loading, Errored]


class Session:

    def __init__(self):
        self._state: SessionState = Idle()
        self._search_term: str = ""

    # === properties ===

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def loading_kind(self) -> ActionKind | None:
        return self._state.kind if isinstance(self._state, Loading) else None

    @property
    def error(self) -> str | None:
        return self._state.message if isinstance(self._state, Errored) else None

    @property
    def search_term(self) -> str:
        return self._search_term

    @search_term.setter
    def search_term(self, term: str) -> None:
        self._search_term = term

    # === transitions ===

    def begin(self, kind: ActionKind) -> None:
        # entering Loading drops any previous message
        self._state = Loading(kind)

    def fail(self, kind: ActionKind, code: ErrorCode, message: str) -> None:
        self._state = Errored(kind, code, message)

    def clear_error(self) -> None:
        if isinstance(self._state, Errored):
            self._state = Idle()

    def settle(self) -> None:
        """
        Ends a request chain.

        Notes:
            - A chain that ended in `Errored` keeps its message; one still marked `Loading` returns to `Idle`.
        """
        if isinstance(self._state, Loading):
            self._state = Idle()

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Session({self._state!r}, search_term={self._search_term!r})"
