"""Borrowing, returning and reservation queues, with their CSV files."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from librarydesk.catalog import Book, Catalog
from librarydesk.members import Member, MemberDirectory

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
MAX_BORROWED = 3
QUEUE_HEADER = "Member_ID,Book_ID,Title,Queue_Position"
BORROWED = "Borrowed"
RETURNED = "Returned"
RESERVED = "Reserved"

# Longest text accepted in each catalogue column when counts are updated.
_ID_WIDTH = 19
_TITLE_WIDTH = 199
_AUTHOR_WIDTH = 99
_CATEGORY_WIDTH = 49
_YEAR_WIDTH = 5
_STATUS_WIDTH = 19


class BorrowError(Exception):
    """Raised when a book cannot be borrowed or returned."""


@dataclass(frozen=True)
class BorrowRecord:
    """A book a member currently holds."""

    member_id: str
    book_id: str
    title: str


def _rewrite(path: PathLike, lines: Iterable[str]) -> None:
    target = Path(path)
    temporary = target.with_name(target.name + ".tmp")
    with open(temporary, "w", encoding="utf-8") as handle:
        handle.writelines(lines)
    os.replace(temporary, target)


def _split_record(line: str) -> Optional[list]:
    """Split a four-column line; None unless every column has text."""
    fields = line.rstrip("\n").split(",", 3)
    if len(fields) != 4 or not all(fields):
        return None
    return fields


def load_borrow_history(path: PathLike, directory: MemberDirectory) -> int:
    """Give each member the books the history file shows them still holding."""
    loaded = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = _split_record(line)
            if fields is None:
                log.warning("Invalid line format: %s", line.rstrip("\n"))
                continue
            member_id, book_id, title, status = fields
            if status.lstrip().rstrip("\r\n") != BORROWED:
                continue
            member = directory.find(member_id)
            if member is None:
                log.warning("Member with ID [%s] not found.", member_id)
                continue
            member.borrowed.append(BorrowRecord(member.id, book_id, title))
            loaded += 1
    return loaded


def append_history(path: PathLike, member_id: str, book_id: str, title: str,
                   status: str) -> None:
    """Add one line to the borrowing history file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{member_id},{book_id},{title},{status}\n")


def mark_returned(path: PathLike, member_id: str, book_id: str) -> bool:
    """Mark the member's open loans of a book as returned; True if any changed."""
    found = False
    lines = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = _split_record(line)
            if (
                fields is not None
                and fields[0] == member_id
                and fields[1] == book_id
                and fields[3] == BORROWED
            ):
                lines.append(f"{fields[0]},{fields[1]},{fields[2]},{RETURNED}\n")
                found = True
            else:
                lines.append(line)
    _rewrite(path, lines)
    return found


def _parse_catalog_row(line: str) -> Optional[tuple]:
    parts = line.split(",", 7)
    if len(parts) != 8:
        return None
    widths = (_ID_WIDTH, _TITLE_WIDTH, _AUTHOR_WIDTH, _CATEGORY_WIDTH, _YEAR_WIDTH)
    if not all(0 < len(text) <= width for text, width in zip(parts[:5], widths)):
        return None
    if not re.fullmatch(r"\s*[+-]?\d+", parts[5]):
        return None
    if not 0 < len(parts[6]) <= _STATUS_WIDTH:
        return None
    count = re.match(r"\s*([+-]?\d+)", parts[7])
    if count is None:
        return None
    return (*parts[:5], int(parts[5]), parts[6], int(count.group(1)))


def increment_borrow_count(path: PathLike, book_id: str) -> bool:
    """Add one to a book's borrow count in the catalogue file; True if it was there."""
    found = False
    lines = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            row = _parse_catalog_row(line)
            if row is None:
                lines.append(line)
                continue
            row_id, title, author, category, year, quantity, status, count = row
            if row_id == book_id:
                count += 1
                found = True
            lines.append(
                f"{row_id},{title},{author},{category},{year},{quantity},{status},{count}\n"
            )
    _rewrite(path, lines)
    return found


def load_queue(path: PathLike, catalog: Catalog) -> int:
    """Put the members listed in a queue file back into the books' queues."""
    queued = 0
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            fields = _split_record(line)
            if fields is None:
                log.warning("Invalid line format: %s", line.rstrip("\n"))
                continue
            member_id, book_id, _, _ = fields
            book = catalog.find(book_id)
            if book is None:
                log.warning("Book with ID [%s] not found.", book_id)
                continue
            book.reservations.append(member_id)
            queued += 1
    return queued


def save_queue(path: PathLike, catalog: Catalog) -> None:
    """Write every book's reservation queue, front first."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(QUEUE_HEADER + "\n")
        for book in catalog:
            for member_id in book.reservations:
                handle.write(f"{member_id},{book.id},{book.title},{RESERVED}\n")


def borrow(member: Member, book: Book) -> BorrowRecord:
    """Lend one copy of a book to a member."""
    if len(member.borrowed) >= MAX_BORROWED:
        raise BorrowError("You cannot borrow more than 3 books at a time.")
    if book.quantity <= 0:
        raise BorrowError("Sorry, this book is not available for borrowing.")
    book.quantity -= 1
    if book.quantity <= 0:
        book.available = False
    record = BorrowRecord(member.id, book.id, book.title)
    member.borrowed.append(record)
    return record


def give_back(member: Member, book: Book) -> BorrowRecord:
    """Take a borrowed copy back from a member."""
    record = next((item for item in member.borrowed if item.book_id == book.id), None)
    if record is None:
        raise BorrowError(f"Book with ID [{book.id}] is not in your borrowing list.")
    book.quantity += 1
    book.borrow_count += 1
    if book.quantity > 0:
        book.available = True
    member.borrowed.remove(record)
    return record


def reservations_for(catalog: Catalog, member_id: str) -> list:
    """Books whose reservation queue has this member at the front."""
    return [
        book
        for book in catalog
        if book.reservations and book.reservations[0] == member_id
    ]