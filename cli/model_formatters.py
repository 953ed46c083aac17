# cli/model_formatters.py

# anything that renders students or session state for the terminal
from textwrap import dedent

import core.formatters as formatters
from core.orchestrator import RequestOrchestrator
from core.session import ActionKind
from models.student import Student, StudentId

LOADING_TEXT = "Loading students..."
EMPTY_TEXT = "No students found"

BUSY_TEXT = {
    ActionKind.LOAD: LOADING_TEXT,
    ActionKind.CREATE: "Adding...",
    ActionKind.UPDATE: "Updating...",
    ActionKind.DELETE: "Deleting...",
}

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{formatters.truncate(student.name, 24):<24} | {student.email}"


def format_student_row(student: Student, editing_id: StudentId | None = None) -> str:
    marker = " [EDITING]" if editing_id is not None and student.id == editing_id else ""

    return f"{str(student.id):>6} | {format_student_oneline(student)}{marker}"


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Student {student.id}:
        ... Name: {student.name}
        ... Email: {student.email}"""
    )


# === list view ===


def format_list_heading(visible_count: int, search_term: str) -> str:
    heading = f"Student List ({visible_count})"

    return f"{heading} - search: '{search_term}'" if search_term else heading


def format_student_table(orchestrator: RequestOrchestrator) -> str:
    """
    Renders the student list the way the table card shows it.

    Args:
        orchestrator (RequestOrchestrator): The active orchestrator, read for store, form, and session state.

    Returns:
        A multi-line string: a heading, then either a loading notice, an empty notice, or one row per visible student.

    Notes:
        - The loading notice only replaces the table while the store is still empty; a reload over cached rows keeps showing them.
        - An empty store and a search that matches nothing both render the same empty notice.
    """
    session = orchestrator.session
    visible = orchestrator.visible_students

    lines = [format_list_heading(len(visible), session.search_term)]

    if session.loading and orchestrator.store.is_empty:
        lines.append(f"  {LOADING_TEXT}")

    elif not visible:
        lines.append(f"  {EMPTY_TEXT}")

    else:
        lines.append(f"{'ID':>6} | {'Name':<24} | Email")
        lines.append("-" * 50)
        editing_id = orchestrator.form.editing_id
        lines.extend(format_student_row(student, editing_id) for student in visible)

    return "\n".join(lines)


# === form view ===


def format_form_title(orchestrator: RequestOrchestrator) -> str:
    return "Edit Student" if orchestrator.form.is_editing else "Add New Student"


def format_submit_label(orchestrator: RequestOrchestrator) -> str:
    session = orchestrator.session

    if orchestrator.form.is_editing:
        return "Updating..." if session.loading else "Update Student"

    return "Adding..." if session.loading else "Add Student"


def format_form(orchestrator: RequestOrchestrator) -> str:
    form = orchestrator.form

    return dedent(
        f"""\
        {format_form_title(orchestrator)}:
        ... Name: {form.name or '[EMPTY]'}
        ... Email: {form.email or '[EMPTY]'}"""
    )


def format_status_line(orchestrator: RequestOrchestrator) -> str | None:
    session = orchestrator.session

    if session.error:
        return f"[ERROR] {session.error}"

    if session.loading:
        return f"[BUSY] {BUSY_TEXT[session.loading_kind]}"

    return None
