# core/list_filter.py

# pure projection of the record store, holds no state and never touches the network

from __future__ import annotations

from typing import Iterable

from models.student import Student


def matches(student: Student, search_term: str) -> bool:
    needle = search_term.lower()

    return needle in student.name.lower() or needle in student.email.lower()


def filter_students(students: Iterable[Student], search_term: str) -> list[Student]:
    """
    Returns the students whose name or email contains `search_term`.

    Args:
        students (Iterable[Student]): The record store's current sequence.
        search_term (str): The text typed into the search box.

    Returns:
        The matching students, in store order. An empty term matches everything.
    """
    if not search_term:
        return list(students)

    return [student for student in students if matches(student, search_term)]
