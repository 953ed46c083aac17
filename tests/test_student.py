# tests/test_student.py

import pytest

from models.student import Student


def test_student_from_dict_rejects_non_string_name():
    with pytest.raises(TypeError, match="name"):
        Student.from_dict({"id": 1, "name": None, "email": "a@x.com"})

    with pytest.raises(TypeError, match="email"):
        Student.from_dict({"id": 1, "name": "Ann", "email": 42})


def test_student_from_dict_ignores_extra_keys():
    student = Student.from_dict(
        {"id": 7, "name": "Bo", "email": "bo@x.com", "createdAt": "2025-01-01"}
    )

    assert student.id == 7
    assert student.name == "Bo"
    assert student.email == "bo@x.com"


def test_student_from_dict_missing_field():
    with pytest.raises(KeyError):
        Student.from_dict({"id": 7, "name": "Bo"})


def test_student_payload_has_no_id():
    assert Student.to_payload("Bo", "bo@x.com") == {"name": "Bo", "email": "bo@x.com"}


def test_student_equality(sample_student):
    assert sample_student == Student(1, "Ann", "a@x.com")
    assert sample_student != Student(1, "Ann", "ann@x.com")


def test_student_to_str(sample_student):
    assert sample_student.__str__() == "STUDENT: name: Ann, email: a@x.com, id: 1"
