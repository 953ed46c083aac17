# tests/test_list_filter.py

from core.list_filter import filter_students, matches
from models.student import Student


def make_students(records):
    return [Student.from_dict(record) for record in records]


def test_empty_term_matches_everything(sample_records):
    students = make_students(sample_records)

    assert filter_students(students, "") == students


def test_search_is_case_insensitive():
    students = [Student(1, "Ann", "a@x.com")]

    assert [s.id for s in filter_students(students, "ann")] == [1]
    assert [s.id for s in filter_students(students, "ANN")] == [1]


def test_search_with_no_match_is_empty():
    students = [Student(1, "Ann", "a@x.com")]

    assert filter_students(students, "zzz") == []


def test_search_matches_email(sample_records):
    students = make_students(sample_records)

    result = filter_students(students, "example.ORG")

    assert [s.id for s in result] == [3]


def test_search_preserves_store_order(sample_records):
    students = make_students(list(reversed(sample_records)))

    result = filter_students(students, "a")

    assert [s.id for s in result] == [3, 2, 1]


def test_search_is_idempotent(sample_records):
    students = make_students(sample_records)

    once = filter_students(students, "d")
    twice = filter_students(once, "d")

    assert once == twice
    assert once == filter_students(students, "d")


def test_matches_substring_in_middle_of_name():
    assert matches(Student(2, "Carlos Diaz", "c@x.com"), "los d")
