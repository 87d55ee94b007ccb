"""Screens for borrowing, returning and reservation queues."""

from __future__ import annotations

from typing import Callable, Optional

from librarydesk.borrowing import (
    BORROWED,
    MAX_BORROWED,
    BorrowError,
    BorrowRecord,
    append_history,
    borrow,
    give_back,
    increment_borrow_count,
    mark_returned,
    reservations_for,
    save_queue,
)
from librarydesk.catalog import Book
from librarydesk.console import Console
from librarydesk.members import Member
from librarydesk.state import LibraryState

BORROWING_WIDTH = 115
QUEUE_WIDTH = 100


def _fail(console: Console, message: str) -> None:
    console.clear()
    console.write(f" {message}\n")
    console.line()
    console.pause()


def _try_file(console: Console, action: Callable, *args) -> None:
    try:
        action(*args)
    except OSError as error:
        console.write(f" !!! Error : {error}\n")


def show_borrowing(console: Console, member: Member) -> None:
    """List the books a member currently holds."""
    if not member.borrowed:
        _fail(console, f"!!! Member [{member.id}] has no books borrowed.")
        return
    console.double_line()
    console.write(f" Borrowing Books List for Member [{member.id}]\n")
    console.double_line()
    console.write(f" {'Book ID':<20} {'Title':<50}\n")
    for record in member.borrowed:
        console.write(f" {record.book_id:<20} {record.title:<50}\n")
    console.double_line()


def _record_loan(console: Console, state: LibraryState, member: Member, book: Book) -> None:
    _try_file(console, append_history, state.paths.history, member.id, book.id,
              book.title, BORROWED)


def borrow_prompt(console: Console, state: LibraryState, member: Member) -> Optional[BorrowRecord]:
    """Ask for a book id and lend it, or offer the reservation queue."""
    if len(member.borrowed) >= MAX_BORROWED:
        console.clear()
        console.write(" !!!You cannot borrow more than 3 books at a time.\n")
        console.line()
        console.wait_for_exit()
        return None
    book_id = console.ask(" Enter the ID of the book you want to borrow : ")
    book = state.catalog.find(book_id)
    if book is None:
        console.line()
        console.write(" Book not found.\n")
        console.double_line()
        console.wait_for_exit()
        return None

    console.clear()
    console.line()
    console.write(f" Book found: {book.title} (ID : {book.id})\n")
    console.write(f" Quantity available : {book.quantity}\n")
    console.line()
    record = None
    if console.ask_yes_no(" Do you want to borrow this book? (Y/N) : "):
        try:
            record = borrow(member, book)
        except BorrowError as error:
            console.line()
            console.write(f" {error}\n")
            reservation_prompt(console, state, book)
        else:
            _record_loan(console, state, member, book)
            _try_file(console, state.catalog.save_csv, state.paths.books)
            _try_file(console, increment_borrow_count, state.paths.books, book.id)
            console.line()
            console.write(
                f" You have successfully borrowed the book: {book.title} (ID: {book.id})\n"
            )
            console.double_line()
    else:
        console.line()
        console.write(" Borrowing cancelled.\n")
        console.double_line()
    console.wait_for_exit()
    return record


def reservation_prompt(console: Console, state: LibraryState, book: Book) -> bool:
    """Offer to put someone in a book's reservation queue; True if they joined."""
    console.clear()
    if not console.ask_yes_no(" Do you want to join the reservation queue (Y/N): "):
        _fail(console, "Reservation cancelled.")
        return False
    member_id = console.ask(" Enter your ID: ")
    console.write(f" Adding [{member_id}] to the reservation queue for book : {book.title}\n")
    book.reservations.append(member_id)
    console.write(" Current queue: " + "".join(f"{item} -> " for item in book.reservations)
                  + "NULL\n")
    _try_file(console, save_queue, state.paths.queue, state.catalog)
    console.wait_for_exit()
    return True


def notify_reservations(console: Console, state: LibraryState, member: Member) -> list:
    """Offer each book reserved with this member at the front; return those borrowed."""
    borrowed = []
    for book in reservations_for(state.catalog, member.id):
        console.clear()
        console.double_line()
        console.write(f"   Member ID: [{member.id}] | Name: [{member.full_name}]\n")
        console.double_line()
        console.write("\n !!! Notification !!!\n")
        console.double_line()
        console.write(f" The book '{book.title}' (ID: {book.id}) \n is now available for you.\n")
        console.double_line()
        answer = console.ask_token(" Do you want to borrow this book (Y/N): ")[:1]
        if answer in ("Y", "y"):
            if book.quantity > 0:
                book.quantity -= 1
                if book.quantity <= 0:
                    book.available = False
                member.borrowed.append(BorrowRecord(member.id, book.id, book.title))
                _record_loan(console, state, member, book)
                _try_file(console, increment_borrow_count, state.paths.books, book.id)
                console.clear()
                console.write(
                    f" You have successfully borrowed the book: {book.title} (ID: {book.id})\n"
                )
                console.double_line()
                console.pause()
                borrowed.append(book)
        elif answer in ("N", "n"):
            console.clear()
            console.write(" You have declined to borrow the book.\n")
            console.double_line()
            console.pause()
        book.reservations.popleft()
    _try_file(console, save_queue, state.paths.queue, state.catalog)
    return borrowed


def return_prompt(console: Console, state: LibraryState, member: Member) -> Optional[BorrowRecord]:
    """Ask which held book to return and take it back."""
    if not member.borrowed:
        console.double_line()
        console.write(f" Member [{member.id}] has no books borrowed.\n")
        console.double_line()
        return None
    show_borrowing(console, member)
    book_id = console.ask(" Enter the ID of the book you want to return: ")
    if not any(record.book_id == book_id for record in member.borrowed):
        _fail(console, f"!!! Error: Book with ID [{book_id}] is not in your borrowing list.")
        return None
    book = state.catalog.find(book_id)
    if book is None:
        _fail(console, "!!! Error: Book not found in the library.")
        return None
    if not console.ask_yes_no(" Do you want to return this book (Y/N): "):
        console.clear()
        console.write(" Returning cancelled.\n")
        console.line()
        return None
    record = give_back(member, book)
    _try_file(console, mark_returned, state.paths.history, member.id, book.id)
    _try_file(console, increment_borrow_count, state.paths.books, book.id)
    console.clear()
    console.write(f" You have successfully returned the book: {book.title} (ID: {book.id})\n")
    console.line()
    return record


def show_all_borrowing(console: Console, state: LibraryState) -> None:
    """List every member holding books, with the books they hold."""
    if not len(state.members):
        console.write(" !!! No borrowing history available.\n")
        return
    console.double_rule(BORROWING_WIDTH)
    console.write(f"{'All Borrowing Members and Their Borrowed Books':>81}\n")
    console.double_rule(BORROWING_WIDTH)
    for member in state.members:
        if not member.borrowed:
            continue
        console.write(f" Member ID: [{member.id}] | Name: [{member.full_name}]\n")
        console.rule(BORROWING_WIDTH)
        for record in member.borrowed:
            console.write(f"\t- Book-ID: {record.book_id:<17}  Title: {record.title:<80}\n")
        console.write("\n")
        console.double_rule(BORROWING_WIDTH)
    console.wait_for_exit()


def show_all_queues(console: Console, state: LibraryState) -> None:
    """List every book's reservation queue with member names."""
    console.double_rule(QUEUE_WIDTH)
    console.write(f"{'Borrowing Queue for All Books':>64}\n")
    console.double_rule(QUEUE_WIDTH)
    shown = 0
    for book in state.catalog:
        if not book.reservations:
            continue
        shown += 1
        console.write(f" Book ID: [{book.id}] | Title: {book.title}\n")
        console.rule(QUEUE_WIDTH)
        console.write(f" {'Position':<10} | {'User ID':<20} | {'Member Name':<30}\n")
        console.rule(QUEUE_WIDTH)
        for position, member_id in enumerate(book.reservations, 1):
            member = state.members.find(member_id)
            name = member.full_name if member is not None else "Unknown"
            console.write(f" {position:<10} | {member_id:<20} | {name:<30}\n")
        console.double_rule(QUEUE_WIDTH)
    if not shown:
        console.write(" No books have a borrowing queue.\n")
    console.double_rule(QUEUE_WIDTH)
    console.wait_for_exit()