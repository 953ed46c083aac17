# tests/test_form_controller.py

import pytest

from core.form_controller import CreateMode, EditMode, FormController
from core.response import ErrorCode
from models.student import Student


@pytest.fixture
def form():
    return FormController()


def test_form_starts_in_create_mode(form):
    assert form.mode == CreateMode()
    assert form.name == ""
    assert form.email == ""
    assert not form.is_editing
    assert form.editing_id is None


def test_begin_edit_prefills_fields(form, sample_student):
    form.begin_edit(sample_student)

    assert form.mode == EditMode(1)
    assert form.editing_id == 1
    assert form.name == "Ann"
    assert form.email == "a@x.com"


def test_begin_edit_from_edit_mode_overwrites_fields(form, sample_student):
    form.begin_edit(sample_student)
    form.set_name("Annie (unsaved)")

    form.begin_edit(Student(2, "Bo", "bo@x.com"))

    assert form.mode == EditMode(2)
    assert form.name == "Bo"
    assert form.email == "bo@x.com"


def test_cancel_returns_to_create_with_empty_fields(form, sample_student):
    form.begin_edit(sample_student)
    form.set_email("changed@x.com")

    response = form.cancel()

    assert response.success
    assert form.mode == CreateMode()
    assert form.name == ""
    assert form.email == ""


def test_cancel_in_create_mode_is_rejected(form):
    form.set_name("Bo")

    response = form.cancel()

    assert not response.success
    assert response.error is ErrorCode.INVALID_STATE
    assert form.name == "Bo"


def test_validate_rejects_empty_email(form):
    form.set_name("Bo")

    response = form.validate()

    assert not response.success
    assert response.error is ErrorCode.MISSING_REQUIRED_FIELD
    assert response.detail == "Please fill all fields"


def test_validate_rejects_whitespace_only_name(form):
    form.set_name("   ")
    form.set_email("bo@x.com")

    assert not form.validate().success


def test_validate_does_not_check_email_format(form):
    form.set_name("Bo")
    form.set_email("not-an-email")

    response = form.validate()

    assert response.success
    assert response.data == {"name": "Bo", "email": "not-an-email"}


def test_reset_clears_edit_mode(form, sample_student):
    form.begin_edit(sample_student)

    form.reset()

    assert form.mode == CreateMode()
    assert (form.name, form.email) == ("", "")
