# cli/students_menu.py

"""
Manage Students screen for the student records CLI.

This module renders the form, status line, and student table, and dispatches the
user's menu choice to the `RequestOrchestrator`:
- Adding a student, or updating the one under edit
- Entering and cancelling edit mode
- Deleting a student after a yes/no confirmation
- Searching the loaded list and refreshing it from the service

The initial load runs as a background task, so the menu is usable straight away.
Searching works while it is pending; mutating choices are refused by the
orchestrator until it settles. All other requests are awaited before the menu is
shown again.
"""

import asyncio
from collections.abc import Awaitable, Callable

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.orchestrator import RequestOrchestrator
from core.session import ActionKind
from models.student import StudentId

MenuAction = Callable[[RequestOrchestrator], Awaitable[None]]


async def run(orchestrator: RequestOrchestrator) -> None:
    """
    Top-level loop with dispatch for the Manage Students screen.

    Args:
        orchestrator (RequestOrchestrator): The active orchestrator.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The finally block waits for the initial load, since in-flight requests are never cancelled.
        - Prompts run on daemon threads (see `menu_helpers.run_blocking()`), so Ctrl-C does not wait for a pending `input()`.
    """
    title = formatters.format_banner_text("Student Management System")
    zero_option = "Exit Program"

    mount_task = asyncio.create_task(orchestrator.mount())

    try:
        while True:
            render(orchestrator)

            menu_response = await helpers.run_blocking(
                helpers.display_menu, title, build_options(orchestrator), zero_option
            )

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                await menu_response(orchestrator)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        await mount_task


def build_options(orchestrator: RequestOrchestrator) -> list[tuple[str, MenuAction]]:
    options: list[tuple[str, MenuAction]] = [
        (model_formatters.format_submit_label(orchestrator), fill_and_submit),
        ("Edit Student", select_and_edit_student),
    ]

    if orchestrator.form.is_editing:
        options.append(("Cancel Edit", cancel_edit))

    options.append(("Delete Student", select_and_delete_student))
    options.append(("Search Students", search_students))

    if orchestrator.session.search_term:
        options.append(("Clear Search", clear_search))

    options.append(("Refresh List", refresh_students))

    return options


def render(orchestrator: RequestOrchestrator) -> None:
    status_line = model_formatters.format_status_line(orchestrator)

    if status_line is not None:
        print(f"\n{status_line}")

    print(f"\n{model_formatters.format_form(orchestrator)}")
    print(f"\n{model_formatters.format_student_table(orchestrator)}")


# === add or update student ===


async def fill_and_submit(orchestrator: RequestOrchestrator) -> None:
    """
    Prompts for the form fields, then submits the form.

    Args:
        orchestrator (RequestOrchestrator): The active orchestrator.

    Notes:
        - Leaving a prompt blank keeps the field's current value. In edit mode that is the selected record's value.
        - Field input is refused while a request is in flight; nothing is submitted in that case.
        - Validation and the remote call are delegated to `RequestOrchestrator.submit()`.
    """
    form = orchestrator.form

    name = await helpers.run_blocking(
        helpers.prompt_user_input_or_default,
        f"Enter student name (leave blank to keep '{form.name}'):",
    )

    if name is not MenuSignal.DEFAULT:
        name_response = orchestrator.set_name(name)

        if not name_response.success:
            helpers.display_response_failure(name_response)
            return

    email = await helpers.run_blocking(
        helpers.prompt_user_input_or_default,
        f"Enter student email (leave blank to keep '{form.email}'):",
    )

    if email is not MenuSignal.DEFAULT:
        email_response = orchestrator.set_email(email)

        if not email_response.success:
            helpers.display_response_failure(email_response)
            return

    kind = ActionKind.UPDATE if form.is_editing else ActionKind.CREATE
    print(f"\n{model_formatters.BUSY_TEXT[kind]}")

    helpers.display_response(await orchestrator.submit())


# === edit student ===


async def select_and_edit_student(orchestrator: RequestOrchestrator) -> None:
    student = await helpers.run_blocking(
        helpers.prompt_selection_from_list,
        orchestrator.visible_students,
        "Students",
        model_formatters.format_student_oneline,
    )

    if student is None:
        helpers.returning_without_changes()
        return

    # the store may have been reloaded while the prompt was open
    lookup_response = orchestrator.store.find_student_by_id(student.id)

    if not lookup_response.success:
        helpers.display_response_failure(lookup_response)
        return

    student = lookup_response.data["record"]
    edit_response = orchestrator.begin_edit(student)

    if not edit_response.success:
        helpers.display_response_failure(edit_response)
        return

    print(f"\n{model_formatters.format_student_multiline(student)}")


async def cancel_edit(orchestrator: RequestOrchestrator) -> None:
    helpers.display_response(orchestrator.cancel_edit())


# === delete student ===


async def select_and_delete_student(orchestrator: RequestOrchestrator) -> None:
    """
    Prompts the user to pick a visible student and deletes it after confirmation.

    Args:
        orchestrator (RequestOrchestrator): The active orchestrator.

    Notes:
        - The confirmation prompt is the orchestrator's yes/no gate; declining makes no request.
    """
    student = await helpers.run_blocking(
        helpers.prompt_selection_from_list,
        orchestrator.visible_students,
        "Students",
        model_formatters.format_student_oneline,
    )

    if student is None:
        helpers.returning_without_changes()
        return

    print(f"\n{model_formatters.format_student_multiline(student)}")

    async def confirm(_: StudentId) -> bool:
        return await helpers.run_blocking(helpers.confirm_delete)

    helpers.display_response(await orchestrator.delete_student(student.id, confirm))


# === search and refresh ===


async def search_students(orchestrator: RequestOrchestrator) -> None:
    search_term = await helpers.run_blocking(
        helpers.prompt_user_input,
        "Search by name or email (leave blank to show all):",
    )

    orchestrator.set_search_term(search_term)


async def clear_search(orchestrator: RequestOrchestrator) -> None:
    orchestrator.set_search_term("")


async def refresh_students(orchestrator: RequestOrchestrator) -> None:
    print(f"\n{model_formatters.LOADING_TEXT}")

    helpers.display_response(await orchestrator.refresh())
