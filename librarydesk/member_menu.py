"""Member registration and lookup screens, and the menu members use."""

from __future__ import annotations

from typing import Optional

from librarydesk.book_views import search_books, show_all_books
from librarydesk.borrow_views import borrow_prompt, notify_reservations, return_prompt
from librarydesk.console import Console, check_num
from librarydesk.members import Member, read_history
from librarydesk.state import LibraryState

TABLE_WIDTH = 115
_FIELD_PROMPTS = (
    " Enter ID : ",
    " Enter First Name : ",
    " Enter Last Name : ",
    " Enter Phone Number : ",
    " Enter Email : ",
)


def _fail(console: Console, message: str) -> None:
    console.clear()
    console.write(f" {message}\n")
    console.line()
    console.pause()


def _ask_member_fields(console: Console) -> list:
    console.double_line()
    return [console.ask(prompt).rstrip(" \t") for prompt in _FIELD_PROMPTS]


def _save_members(console: Console, state: LibraryState) -> bool:
    try:
        state.members.save(state.paths.members)
    except OSError as error:
        console.clear()
        console.write(f" !!! Error opening file for writing. {error}\n")
        console.line()
        console.pause()
        return False
    return True


def _save_books_and_queue(console: Console, state: LibraryState) -> None:
    try:
        state.save()
    except OSError as error:
        console.write(f" !!! Error : {error}\n")


def register_member_prompt(console: Console, state: LibraryState) -> Member:
    """Ask for a new member's details, add them and save the member file."""
    member = Member(*_ask_member_fields(console))
    state.members.insert(member)
    _save_members(console, state)
    console.double_line()
    console.write(" Member added successfully.\n")
    console.double_line()
    console.wait_for_exit()
    return member


def update_member_prompt(console: Console, state: LibraryState) -> Optional[Member]:
    """Ask for a member id and replace that member's details."""
    if not len(state.members):
        _fail(console, "!!! Member database is empty.")
        return None
    console.double_line()
    member_id = console.ask(" Enter Member ID to update : ").rstrip(" \t")
    member = state.members.find(member_id)
    if member is None:
        console.clear()
        console.write(f" !!! Member with ID [{member_id}] not found.\n")
        console.line()
        console.wait_for_exit()
        return None

    console.write(f" Editing member : {member.first_name} {member.last_name}\n")
    (member.id, member.first_name, member.last_name,
     member.phone, member.email) = _ask_member_fields(console)
    if _save_members(console, state):
        console.double_line()
        console.write(" Member updated successfully.\n")
        console.double_line()
    else:
        console.clear()
        console.write(" !!! Error saving changes.\n")
        console.line()
    console.wait_for_exit()
    return member


def show_members(console: Console, state: LibraryState) -> None:
    """List every member in id order."""
    if not len(state.members):
        _fail(console, "No members to display.")
        return
    console.clear()
    console.double_rule(TABLE_WIDTH)
    console.write(f"{'List of Members':>65}\n")
    console.double_rule(TABLE_WIDTH)
    console.write(
        f" {'ID':<15} | {'First Name':<20} | {'Last Name':<20} | "
        f"{'Phone Number':<15} | {'Email':<50}\n"
    )
    console.rule(TABLE_WIDTH)
    for member in state.members:
        console.write(
            f" {member.id:<15} | {member.first_name:<20} | {member.last_name:<20} | "
            f"{member.phone:<15} | {member.email:<10}\n"
        )
    console.double_rule(TABLE_WIDTH)
    console.wait_for_exit()


def history_prompt(console: Console, state: LibraryState) -> list:
    """Ask for a member id and show that member's borrowing history."""
    console.double_rule(TABLE_WIDTH)
    member_id = console.ask(" Enter Member ID to check history : ").rstrip(" \t")
    console.rule(TABLE_WIDTH)
    try:
        entries = read_history(state.paths.history, member_id)
    except OSError:
        _fail(console, "!!! Cannot open borrow history file")
        return []
    console.write(f" Borrow History for Member ID : {member_id}\n")
    console.rule(TABLE_WIDTH)
    console.write(f" {'Book-ID':<18} | {'Title':<80} | {'Status':<5}\n")
    console.rule(TABLE_WIDTH)
    for entry in entries:
        console.write(f" {entry.book_id:<18} | {entry.title:<80} | {entry.status:<5}\n")
    if not entries:
        _fail(console, "No borrowing history found.")
    console.double_rule(TABLE_WIDTH)
    console.wait_for_exit()
    return entries


def _identify(console: Console, state: LibraryState) -> Member:
    while True:
        console.clear()
        console.double_line()
        console.write(" Please enter your ID\n")
        console.double_line()
        member_id = console.ask(" Enter your ID : ")
        member = state.members.find(member_id)
        if member is not None:
            return member
        _fail(console, f"Member with ID [{member_id}] not found.")


def member_menu(console: Console, state: LibraryState) -> None:
    """Identify a member, offer their reservations, then run the member menu."""
    from librarydesk.librarian import show_top_books

    member = _identify(console, state)
    notify_reservations(console, state, member)
    while True:
        console.clear()
        console.double_line()
        console.write(f"{'Welcome to Member Management System':>42}\n")
        console.line()
        console.write(f" [{member.id}] {member.first_name} {member.last_name}\n")
        console.double_line()
        for number, label in enumerate(
            ("Show All Books", "The Most Borrowed Book", "Search Book", "Return Book", "Exit"), 1
        ):
            console.write(f" [{number}] | {label}\n")
        console.double_line()
        choice = check_num(console.ask_token(" Please select an option : "))
        console.clear()
        if choice == 1:
            show_all_books(console, state.catalog)
        elif choice == 2:
            show_top_books(console, state)
        elif choice == 3:
            search_books(console, state.catalog)
            borrow_prompt(console, state, member)
        elif choice == 4:
            return_prompt(console, state, member)
            console.wait_for_exit()
        elif choice == 5:
            console.write(" Exiting the program . . .\n")
            console.pause()
            break
        else:
            console.write(" Invalid choice. Please try again.\n")
            console.pause()
    _save_books_and_queue(console, state)