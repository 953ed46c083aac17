# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the student records client.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for user input and yes/no confirmation
- Running blocking prompts off the event loop
- Displaying standard system messages and error feedback

These functions are shared by the menu modules to keep prompts and messages consistent.
"""

import asyncio
import threading
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

import core.formatters as formatters
from core.response import Response

T = TypeVar("T")


class MenuSignal(Enum):
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT` on blank input.
# - `confirm_action()` loops until the user enters a valid yes/no response.
# - `run_blocking()` moves any of these onto a daemon thread so the event loop keeps
#   servicing in-flight requests while the user types.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_delete() -> bool:
    return confirm_action("Are you sure you want to delete this student?")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


async def run_blocking(func: Callable[..., T], *args: Any) -> T:
    """
    Runs a blocking prompt on a daemon thread and awaits its result.

    Args:
        func (Callable[..., T]): The blocking function, usually a prompt helper.
        *args (Any): Positional arguments passed to `func`.

    Returns:
        Whatever `func` returns. Exceptions raised by `func` are re-raised here.

    Notes:
        - The thread is a daemon, so on Ctrl-C the program exits without waiting for a pending `input()` to return.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[T] = loop.create_future()

    def deliver(result: T | None, error: BaseException | None) -> None:
        if future.done():
            return

        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def worker() -> None:
        try:
            result = func(*args)
        except BaseException as e:
            loop.call_soon_threadsafe(deliver, None, e)
        else:
            loop.call_soon_threadsafe(deliver, result, None)

    threading.Thread(target=worker, name="prompt", daemon=True).start()

    return await future


# === selection ===


def prompt_selection_from_list(
    list_data: list[T],
    list_description: str,
    formatter: Callable[[T], str] = lambda x: str(x),
) -> T | None:
    """
    Prompts the user to select an item from a list of records.

    Args:
        list_data (list[T]): The records to choose from.
        list_description (str): A short description used in prompts and headings (e.g. "Students").
        formatter (Callable[[T], str], optional): Function to convert each record to a display string. Defaults to str().

    Returns:
        The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".

    Notes:
        - Records are shown in the order given; the list is not re-sorted.
        - Menu is repeated until a valid selection is made or canceled.
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()} to choose from.")
        return None

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
    """
    if response.success:
        return

    error_label = response.error.name if response.error is not None else "UNKNOWN"

    print(f"\n[ERROR: {error_label}] {response.detail}")


def display_response(response: Response) -> None:
    if response.success:
        if response.detail:
            print(f"\n{response.detail}")
    else:
        display_response_failure(response)
