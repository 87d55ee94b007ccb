import io
from collections import deque

from librarydesk.borrow_views import (
    borrow_prompt,
    notify_reservations,
    reservation_prompt,
    return_prompt,
    show_all_borrowing,
    show_all_queues,
    show_borrowing,
)
from librarydesk.borrowing import BorrowRecord, append_history, borrow
from librarydesk.catalog import Catalog
from librarydesk.console import Console
from librarydesk.members import Member
from librarydesk.state import DataPaths, LibraryState


def make_console(text):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, clear_command=None, pause_seconds=0)
    return console, out


def make_state(tmp_path, quantity=1):
    state = LibraryState(DataPaths.from_dir(tmp_path))
    member = Member("M001", "Ann", "Lee", "555", "ann@example.com")
    state.members.insert(member)
    book = state.catalog.add_book(0, 2014, "Dune", "Frank Herbert", quantity)
    return state, member, book


def test_borrow_prompt_lends_and_records(tmp_path):
    state, member, book = make_state(tmp_path)
    console, out = make_console(f"{book.id}\nY\nE\n")
    record = borrow_prompt(console, state, member)
    assert record.book_id == book.id
    assert book.quantity == 0
    assert book.available is False
    assert member.borrowed == [record]
    history = state.paths.history.read_text(encoding="utf-8")
    assert history == f"M001,{book.id},Dune,Borrowed\n"
    reloaded = Catalog()
    reloaded.load_csv(state.paths.books)
    assert reloaded.find(book.id).borrow_count == 1


def test_borrow_prompt_limit(tmp_path):
    state, member, book = make_state(tmp_path)
    member.borrowed.extend(BorrowRecord("M001", f"X{n}", "t") for n in range(3))
    console, out = make_console("E\n")
    assert borrow_prompt(console, state, member) is None
    assert "more than 3 books" in out.getvalue()
    assert book.quantity == 1


def test_borrow_prompt_unknown_book(tmp_path):
    state, member, _ = make_state(tmp_path)
    console, out = make_console("NOPE\nE\n")
    assert borrow_prompt(console, state, member) is None
    assert "Book not found." in out.getvalue()


def test_borrow_prompt_cancelled(tmp_path):
    state, member, book = make_state(tmp_path)
    console, out = make_console(f"{book.id}\nn\nE\n")
    assert borrow_prompt(console, state, member) is None
    assert book.quantity == 1
    assert "Borrowing cancelled." in out.getvalue()


def test_borrow_unavailable_joins_queue(tmp_path):
    state, member, book = make_state(tmp_path, quantity=0)
    console, _ = make_console(f"{book.id}\nY\nY\nM001\nE\nE\n")
    assert borrow_prompt(console, state, member) is None
    assert book.reservations == deque(["M001"])
    lines = state.paths.queue.read_text(encoding="utf-8").splitlines()
    assert lines[1] == f"M001,{book.id},Dune,Reserved"


def test_reservation_prompt_declined(tmp_path):
    state, _, book = make_state(tmp_path)
    console, out = make_console("N\n")
    assert reservation_prompt(console, state, book) is False
    assert len(book.reservations) == 0
    assert "Reservation cancelled." in out.getvalue()


def test_return_prompt(tmp_path):
    state, member, book = make_state(tmp_path)
    borrow(member, book)
    append_history(state.paths.history, "M001", book.id, "Dune", "Borrowed")
    state.catalog.save_csv(state.paths.books)
    console, _ = make_console(f"{book.id}\nY\n")
    record = return_prompt(console, state, member)
    assert record.book_id == book.id
    assert book.quantity == 1
    assert book.available is True
    assert member.borrowed == []
    assert "Returned" in state.paths.history.read_text(encoding="utf-8")


def test_return_prompt_not_held(tmp_path):
    state, member, book = make_state(tmp_path)
    borrow(member, book)
    console, out = make_console("OTHER\n")
    assert return_prompt(console, state, member) is None
    assert "not in your borrowing list" in out.getvalue()
    assert len(member.borrowed) == 1


def test_notify_reservation_accepted(tmp_path):
    state, member, book = make_state(tmp_path)
    state.catalog.save_csv(state.paths.books)
    book.reservations.append("M001")
    console, _ = make_console("Y\n")
    assert notify_reservations(console, state, member) == [book]
    assert len(book.reservations) == 0
    assert member.borrowed[0].book_id == book.id
    assert book.quantity == 0
    lines = state.paths.queue.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1


def test_notify_reservation_declined(tmp_path):
    state, member, book = make_state(tmp_path)
    book.reservations.extend(["M001", "M002"])
    console, out = make_console("N\n")
    assert notify_reservations(console, state, member) == []
    assert book.reservations == deque(["M002"])
    assert member.borrowed == []
    assert "declined" in out.getvalue()


def test_show_borrowing_lists_books(tmp_path):
    state, member, book = make_state(tmp_path)
    borrow(member, book)
    console, out = make_console("")
    show_borrowing(console, member)
    assert book.id in out.getvalue()


def test_show_all_borrowing(tmp_path):
    state, member, book = make_state(tmp_path)
    borrow(member, book)
    console, out = make_console("E\n")
    show_all_borrowing(console, state)
    text = out.getvalue()
    assert "Member ID: [M001]" in text
    assert "Dune" in text


def test_show_all_queues_names_members(tmp_path):
    state, _, book = make_state(tmp_path)
    book.reservations.extend(["M001", "M999"])
    console, out = make_console("E\n")
    show_all_queues(console, state)
    text = out.getvalue()
    assert "Ann Lee" in text
    assert "Unknown" in text
    assert "No books have a borrowing queue." not in text


def test_show_all_queues_empty(tmp_path):
    state, _, _ = make_state(tmp_path)
    console, out = make_console("E\n")
    show_all_queues(console, state)
    assert "No books have a borrowing queue." in out.getvalue()