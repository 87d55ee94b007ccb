"""Book catalogue organised by category and publication-year band."""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

log = logging.getLogger(__name__)

CATEGORY_NAMES = (
    "Fiction",
    "History",
    "Science",
    "Biography & Autography",
    "Psychology",
    "Religion",
    "Business & Economics",
    "Computers",
    "Cooking",
    "Mathematics",
    "Comics & Graphic Novels",
)
CATEGORY_CODES = (
    "FT01", "HT02", "SC03", "BI04", "PS05", "RE06",
    "BE07", "CP08", "CK09", "MT10", "CG11",
)
YEAR_NAMES = (
    "below 1975",
    "1975-1985",
    "1985-1995",
    "1995-2005",
    "2005-2015",
    "2015-2025",
    "above 2025",
)
NUM_CATEGORIES = len(CATEGORY_NAMES)
NUM_YEARS = len(YEAR_NAMES)
CSV_HEADER = "Book_ID,Title,Author,Category,Year_Published,Quantity,Status,Borrowed"

PathLike = Union[str, Path]


class CatalogError(ValueError):
    """Raised when a catalogue operation cannot be carried out."""


@dataclass
class Book:
    """One title held by the library."""

    id: str
    title: str
    author: str
    category: str
    year: int
    quantity: int
    available: bool = True
    borrow_count: int = 0
    reservations: deque = field(default_factory=deque)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def year_to_index(year: int) -> int:
    """Return the year band index for a publication year."""
    offset = year - 1975
    index = abs(offset) // 10 * (1 if offset >= 0 else -1)
    if index < 0:
        return 0
    if index < 6:
        return index + 1
    return 6


def parse_book_id(book_id: str) -> tuple:
    """Split an id such as FT01-00001-2014 into (category index, year, number)."""
    number = _atoi(book_id[5:10])
    year = _atoi(book_id[11:15])
    category_index = _atoi(book_id[2:4]) - 1
    return category_index, year, number


def is_integer(text: str) -> bool:
    """True if text is a non-empty run of decimal digits."""
    return bool(text) and all(char in "0123456789" for char in text)


def parse_filter(text: str, count: int) -> Optional[int]:
    """Turn a filter choice 0..count into a list index, or None for choice 0."""
    if not is_integer(text):
        raise CatalogError("We aren't accept other type of data except integer")
    value = _atoi(text)
    if value > count or value < 0:
        raise CatalogError("The integer is out of our range of category")
    return None if value == 0 else value - 1


class Catalog:
    """Books kept on shelves, one per category and year band, in insertion order."""

    def __init__(self) -> None:
        self._shelves = [[[] for _ in range(NUM_YEARS)] for _ in range(NUM_CATEGORIES)]

    def shelf(self, category_index: int, year_index: int) -> list:
        """Return the list of books on one shelf."""
        return self._shelves[category_index][year_index]

    def shelves(self) -> Iterator[tuple]:
        """Yield (category index, year index, books) for every shelf."""
        for category_index, row in enumerate(self._shelves):
            for year_index, books in enumerate(row):
                yield category_index, year_index, books

    def __iter__(self) -> Iterator[Book]:
        for _, _, books in self.shelves():
            yield from books

    def add_book(self, category_index: int, year: int, title: str, author: str,
                 quantity: int) -> Book:
        """Append a new book to its shelf, giving it the next id there."""
        if not 0 <= category_index < NUM_CATEGORIES:
            raise CatalogError("Invalid input category")
        books = self.shelf(category_index, year_to_index(year))
        number = _atoi(books[-1].id[5:10]) + 1 if books else 1
        book_id = f"{CATEGORY_CODES[category_index]}-{number:05d}-{year:04d}"
        book = Book(
            id=book_id,
            title=title,
            author=author,
            category=CATEGORY_NAMES[category_index],
            year=year,
            quantity=quantity,
        )
        books.append(book)
        return book

    def find(self, book_id: str) -> Optional[Book]:
        """Return the book with this id, or None."""
        return next((book for book in self if book.id == book_id), None)

    def _shelf_for_id(self, book_id: str) -> list:
        category_index, year, _ = parse_book_id(book_id)
        if not 0 <= category_index < NUM_CATEGORIES:
            raise CatalogError("Invalid input category")
        if year < 0:
            raise CatalogError("Invalid input year")
        return self.shelf(category_index, year_to_index(year))

    def remove(self, book_id: str) -> Book:
        """Remove the book with this id from its shelf and return it."""
        books = self._shelf_for_id(book_id)
        if not books:
            raise CatalogError("No books found in the specified category and year.")
        for position, book in enumerate(books):
            if book.id == book_id:
                return books.pop(position)
        raise CatalogError("The ID Book is not found")

    def update(self, book_id: str, title: str, category_index: int, year: int,
               quantity: int, author: str) -> Book:
        """Change a book; moving it to another shelf re-adds it under a new id."""
        books = self._shelf_for_id(book_id)
        book = next((item for item in books if item.id == book_id), None)
        if book is None:
            raise CatalogError("ID Book is not found")
        if not 0 <= category_index < NUM_CATEGORIES:
            raise CatalogError("Invalid input category")
        old_category, old_year, _ = parse_book_id(book_id)
        if category_index != old_category or year_to_index(year) != year_to_index(old_year):
            books.remove(book)
            return self.add_book(category_index, year, title, author, quantity)
        book.author = author
        book.category = CATEGORY_NAMES[category_index]
        book.title = title
        book.year = year
        book.quantity = quantity
        return book

    def search(self, text: str, category_index: Optional[int] = None,
               year_index: Optional[int] = None) -> list:
        """Books whose title or id contains text, optionally on one category or year band."""
        categories = range(NUM_CATEGORIES) if category_index is None else (category_index,)
        years = range(NUM_YEARS) if year_index is None else (year_index,)
        return [
            book
            for ci in categories
            for yi in years
            for book in self._shelves[ci][yi]
            if text in book.title or text in book.id
        ]

    def load_csv(self, path: PathLike) -> int:
        """Add the books listed in a catalogue file; return how many were loaded."""
        loaded = 0
        with open(path, encoding="utf-8-sig") as handle:
            next(handle, None)
            for raw in handle:
                line = raw.rstrip("\n")
                fields = [part for part in line.split(",") if part]
                if len(fields) < 8:
                    log.warning("Invalid line format: %s", line)
                    continue
                book_id, title, author, category, year_text, quantity_text, _, count_text = fields[:8]
                code = book_id[2:4]
                if len(code) != 2 or not is_integer(code):
                    log.warning("Invalid category in id: %s", book_id)
                    continue
                category_index = int(code) - 1
                year = _atoi(year_text)
                if not 0 <= category_index < NUM_CATEGORIES:
                    log.warning("Invalid categoryIndex (%d)", category_index)
                    continue
                quantity = _atoi(quantity_text)
                self.shelf(category_index, year_to_index(year)).append(
                    Book(
                        id=book_id,
                        title=title,
                        author=author,
                        category=category,
                        year=year,
                        quantity=quantity,
                        available=quantity > 0,
                        borrow_count=_atoi(count_text),
                    )
                )
                loaded += 1
        return loaded

    def save_csv(self, path: PathLike) -> None:
        """Write every book to a catalogue file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(CSV_HEADER + "\n")
            for book in self:
                handle.write(
                    f"{book.id},{book.title},{book.author},{book.category},"
                    f"{book.year},{book.quantity},{int(book.available)},{book.borrow_count}\n"
                )