# models/student.py

"""
Represents a student record held by the remote collection service.

A `Student` is a read-only snapshot of one entry from the last successful list
response. The `id` is assigned by the service and is treated as opaque: it is
never generated or altered locally, only echoed back in update and delete
requests.

Includes functionality for:
- Deserializing a record from a list response entry
- Building the request body for create and update calls
"""

from __future__ import annotations

from typing import Any, Union

StudentId = Union[int, str]


class Student:

    def __init__(self, id: StudentId, name: str, email: str):
        self._id: StudentId = id
        self._name: str = name
        self._email: str = email

    # === properties ===

    @property
    def id(self) -> StudentId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    # === import ===

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Student:
        """
        Builds a `Student` from one entry of a list response.

        Args:
            data (dict[str, Any]): The decoded JSON object for a single record.

        Returns:
            A new `Student` instance.

        Raises:
            KeyError: If `id`, `name`, or `email` is missing.
            TypeError: If `data` is not a mapping, or `name` or `email` is not a string.

        Notes:
            - Extra keys sent by the service are ignored.
        """
        name = data["name"]
        email = data["email"]

        for field, value in (("name", name), ("email", email)):
            if not isinstance(value, str):
                raise TypeError(
                    f"Student {field} must be a string, got {type(value).__name__}"
                )

        return cls(id=data["id"], name=name, email=email)

    @staticmethod
    def to_payload(name: str, email: str) -> dict[str, str]:
        return {"name": name, "email": email}

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return (self._id, self._name, self._email) == (
            other._id,
            other._name,
            other._email,
        )

    def __hash__(self) -> int:
        return hash((self._id, self._name, self._email))

    def __repr__(self) -> str:
        return f"Student({self._id!r}, {self._name!r}, {self._email!r})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, email: {self._email}, id: {self._id}"
