"""The librarian's menus and the ranking screens."""

from __future__ import annotations

from typing import Sequence

from librarydesk.book_views import (
    add_book_prompt,
    delete_book_prompt,
    edit_book_prompt,
    search_books,
    show_all_books,
)
from librarydesk.borrow_views import show_all_borrowing, show_all_queues
from librarydesk.console import Console, check_num
from librarydesk.member_menu import (
    history_prompt,
    register_member_prompt,
    show_members,
    update_member_prompt,
)
from librarydesk.reports import top_borrowed, top_returners
from librarydesk.state import LibraryState

TOP_WIDTH = 115
RETURNERS_WIDTH = 75


def _choose(console: Console, title: str, options: Sequence[str]) -> int:
    console.clear()
    console.double_line()
    console.write(title + "\n")
    console.double_line()
    for number, label in enumerate(options, 1):
        console.write(f" [{number}] | {label}\n")
    console.double_line()
    choice = check_num(console.ask_token(" Please select an option : "))
    console.clear()
    return choice


def _invalid(console: Console) -> None:
    console.write(" Invalid choice. Please try again.\n")
    console.pause()


def _save(console: Console, action, *args) -> None:
    try:
        action(*args)
    except OSError as error:
        console.write(f"Couldn't open a file! {error}\n")


def show_top_books(console: Console, state: LibraryState) -> list:
    """Show the five most borrowed books from the catalogue file."""
    try:
        stats = top_borrowed(state.paths.books, 5)
    except OSError as error:
        console.clear()
        console.write(f"Error opening file: {error}\n")
        console.write(f"Tried to open: {state.paths.books}\n")
        console.line()
        console.pause()
        stats = []
    console.double_rule(TOP_WIDTH)
    console.write(f"{'Top 5 Most Borrowed Books':>70}\n")
    console.double_rule(TOP_WIDTH)
    console.write(f" {'Borrowed':<10} | {'Title':<80} | {'Book ID':<20}\n")
    console.rule(TOP_WIDTH)
    for stat in stats:
        console.write(f" {stat.borrowed:<10} | {stat.title:<80} | {stat.id:<20}\n")
    console.double_rule(TOP_WIDTH)
    console.wait_for_exit()
    return stats


def show_top_returners(console: Console, state: LibraryState) -> list:
    """Show the three members who returned the most books."""
    try:
        stats = top_returners(state.paths.history, state.paths.members, 3)
    except OSError:
        console.clear()
        console.write("Error opening borrow file.\n")
        console.line()
        console.pause()
        return []
    console.double_rule(RETURNERS_WIDTH)
    console.write(f"{'Top 3 members with most borred books':>55}\n")
    console.rule(RETURNERS_WIDTH)
    for rank, stat in enumerate(stats, 1):
        console.write(
            f" [{rank}] {stat.member_id:<10} | {stat.first_name:<15} {stat.last_name:<15} "
            f"({stat.returned:<2} books returned)\n"
        )
    console.double_rule(RETURNERS_WIDTH)
    console.wait_for_exit()
    return stats


def show_books_menu(console: Console, state: LibraryState) -> None:
    """Menu for listing all books or searching them."""
    while True:
        choice = _choose(
            console,
            f"{'Welcome to Show Books Management System':>44}",
            ("Show All Books", "Search Book", "Exit"),
        )
        if choice == 1:
            show_all_books(console, state.catalog)
        elif choice == 2:
            search_books(console, state.catalog)
            console.wait_for_exit()
        elif choice == 3:
            console.write(" Exiting the program . . .\n\n")
            return
        else:
            _invalid(console)


def book_management(console: Console, state: LibraryState) -> None:
    """Menu for adding, editing, deleting and showing books."""
    while True:
        choice = _choose(
            console,
            f" {'Welcome to Book Management System':>40}",
            ("Add Book", "Update Book", "Delete Book", "Show Books", "Exit"),
        )
        if choice == 1:
            add_book_prompt(console, state.catalog)
        elif choice == 2:
            edit_book_prompt(console, state.catalog)
        elif choice == 3:
            delete_book_prompt(console, state.catalog)
        elif choice == 4:
            show_books_menu(console, state)
        elif choice == 5:
            console.write(" Exiting the program . . .\n")
            console.pause()
            break
        else:
            _invalid(console)
    _save(console, state.catalog.save_csv, state.paths.books)


def member_management(console: Console, state: LibraryState) -> None:
    """Menu for registering, updating and listing members and their history."""
    while True:
        choice = _choose(
            console,
            f"{'Welcome to Member Management System':>42}",
            ("Register Member", "Update Member", "Display All Members",
             "Check Borrowing History", "Exit"),
        )
        if choice == 1:
            register_member_prompt(console, state)
        elif choice == 2:
            update_member_prompt(console, state)
        elif choice == 3:
            show_members(console, state)
        elif choice == 4:
            history_prompt(console, state)
        elif choice == 5:
            console.write(" Exiting the program . . .\n\n")
            return
        else:
            _invalid(console)


def borrow_management(console: Console, state: LibraryState) -> None:
    """Menu for the borrowed books list and the reservation queues."""
    while True:
        choice = _choose(
            console,
            f"{'Welcome to Borrow Management System':>42}",
            ("Borrowed Books List", "Reservation Queue", "Exit"),
        )
        if choice == 1:
            show_all_borrowing(console, state)
        elif choice == 2:
            show_all_queues(console, state)
        elif choice == 3:
            console.write(" Exiting the program . . .\n\n")
            return
        else:
            _invalid(console)


def top_borrowed_menu(console: Console, state: LibraryState) -> None:
    """Menu for the book and member rankings."""
    while True:
        choice = _choose(
            console,
            "       Welcome to Top Borrowed Books System",
            ("Top 5 Borrowed Books", "Top 3 Most Active Borrowers", "Exit"),
        )
        if choice == 1:
            show_top_books(console, state)
        elif choice == 2:
            show_top_returners(console, state)
        elif choice == 3:
            console.write(" Exiting the program . . .\n")
            return
        else:
            _invalid(console)


def librarian_menu(console: Console, state: LibraryState) -> None:
    """The librarian's top-level menu; saves books and members on leaving."""
    while True:
        choice = _choose(
            console,
            f"{'Welcome to Librarian Management System':>44}",
            ("Book Management", "Member Management", "Borrow Management",
             "Top Borrowed Books", "Exit"),
        )
        if choice == 1:
            book_management(console, state)
        elif choice == 2:
            member_management(console, state)
        elif choice == 3:
            borrow_management(console, state)
        elif choice == 4:
            top_borrowed_menu(console, state)
        elif choice == 5:
            console.write(" Exiting the program . . .\n\n")
            break
        else:
            _invalid(console)
    _save(console, state.catalog.save_csv, state.paths.books)
    _save(console, state.members.save, state.paths.members)