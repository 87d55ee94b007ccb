"""Screens for listing, searching, adding, editing and deleting books."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from librarydesk.catalog import (
    CATEGORY_NAMES,
    NUM_CATEGORIES,
    YEAR_NAMES,
    Book,
    Catalog,
    CatalogError,
    is_integer,
    parse_book_id,
    parse_filter,
    year_to_index,
)
from librarydesk.console import Console

LIST_WIDTH = 162
SEARCH_WIDTH = 190


def _leading_int(text: str) -> Optional[int]:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else None


def _book_row(book: Book) -> str:
    return (
        f" {book.id:<15} | {book.title:<80} | {book.author:<40} | "
        f"{book.category:<25} | {book.year:<5} | {book.quantity:<3} | {int(book.available):<3}\n"
    )


def _list_row(book: Book) -> str:
    return (
        f"{book.id:<15} | {book.title:<70} | {book.author:<50} | "
        f"{book.year:<5} | {book.quantity:>2}  | {int(book.available):<3}\n"
    )


def _fail(console: Console, message: str) -> None:
    console.clear()
    console.write(f" {message}\n")
    console.line()
    console.pause()


def show_all_books(console: Console, catalog: Catalog) -> None:
    """List every non-empty shelf with its books."""
    console.clear()
    console.double_rule(LIST_WIDTH)
    console.write(f"{'List of Books':>88}\n")
    console.double_rule(LIST_WIDTH)
    for category_index, year_index, books in catalog.shelves():
        if not books:
            continue
        console.write(
            f" Category : [{CATEGORY_NAMES[category_index]}]  | Year : [{YEAR_NAMES[year_index]}]\n"
        )
        console.rule(LIST_WIDTH)
        console.write(
            f"{'ID':<15} | {'Title':<70} | {'Author':<50} | {'Year':<5} | {'Qty':<3} | {'Avl':<3}\n"
        )
        console.rule(LIST_WIDTH)
        for book in books:
            console.write(_list_row(book))
        console.rule(LIST_WIDTH)
    console.double_rule(LIST_WIDTH)
    console.wait_for_exit()


def choose_filter(console: Console, names: Sequence[str]) -> Optional[int]:
    """Offer the names as filters; return the chosen index or None for no filter."""
    console.line()
    for number, name in enumerate(names, 1):
        console.write(f"  [{number}] to use {name}\n")
    console.line()
    console.write("  [0] to not use the filter\n")
    console.double_line()
    while True:
        text = console.ask_token(" Enter Number filter for category it here : ")
        try:
            return parse_filter(text, len(names))
        except CatalogError as error:
            console.write(f" {error}\n")


def search_books(console: Console, catalog: Catalog) -> list:
    """Search titles and ids, with optional category and year filters."""
    console.double_line()
    console.write(f"{'Welcome to search function':>38}\n")
    console.line()
    text = console.ask_token(" Search by id or Name of the book : ")
    console.double_line()
    console.write(" Using filter for category\n")
    category_index = choose_filter(console, CATEGORY_NAMES)
    console.double_line()
    console.write(" Using filter for year\n")
    year_index = choose_filter(console, YEAR_NAMES)

    console.clear()
    console.write(f"{'-- List of Book Below --':>107}\n")
    console.rule(SEARCH_WIDTH)
    console.write(
        f" {'ID':<15} | {'Title':<80} | {'Author':<40} | {'Category':<25} | "
        f"{'Year':<5} | {'Qty':<3} | {'Avl':<3}\n"
    )
    console.rule(SEARCH_WIDTH)
    found = catalog.search(text, category_index, year_index)
    for book in found:
        console.write(_book_row(book))
    console.double_rule(SEARCH_WIDTH)
    console.write(f" Number of book found is : {len(found)}\n")
    console.double_rule(SEARCH_WIDTH)
    return found


def _ask_number(console: Console, prompt: str) -> int:
    while True:
        value = _leading_int(console.ask_token(prompt))
        if value is not None:
            return value


def _ask_digits(console: Console, prompt: str) -> int:
    while True:
        text = console.ask_token(prompt)
        if is_integer(text):
            return int(text)


def add_book_prompt(console: Console, catalog: Catalog) -> Book:
    """Ask for a new book's details and add it to the catalogue."""
    console.double_line()
    console.write(f"{'Adding book':>30}\n")
    console.double_line()
    title = console.ask(" Name of the book : ")
    console.clear()
    console.double_line()
    console.write(" Using filter for category\n")
    category_index = None
    while category_index is None:
        category_index = choose_filter(console, CATEGORY_NAMES)
    year = _leading_int(console.ask_token(" Published year : ")) or 0
    author = console.ask(" Author of the book name : ")
    quantity = _ask_number(console, " Quantity of the book : ")
    book = catalog.add_book(category_index, year, title, author, quantity)
    console.double_line()
    console.write(" Add successfully\n")
    console.double_line()
    console.wait_for_exit()
    return book


def _valid_id(console: Console, book_id: str) -> Optional[tuple]:
    category_index, year, _ = parse_book_id(book_id)
    if not 0 <= category_index < NUM_CATEGORIES:
        _fail(console, "! Invalid input category")
        return None
    if year < 0:
        _fail(console, "! Invalid input year")
        return None
    return category_index, year


def edit_book_prompt(console: Console, catalog: Catalog) -> Optional[Book]:
    """Ask for a book id and new details, then change the book."""
    console.double_line()
    console.write(f"{'Edit book':>30}\n")
    console.double_line()
    book_id = console.ask_token(" Enter the book Id here : ")
    if _valid_id(console, book_id) is None:
        return None
    book = catalog.find(book_id)
    if book is None:
        console.clear()
        console.write(" !!! ID Book is not found\n")
        console.line()
        console.wait_for_exit()
        return None

    console.double_rule(SEARCH_WIDTH)
    console.write(_book_row(book))
    console.double_rule(SEARCH_WIDTH)
    title = console.ask(" Enter new title : ")
    category_index = None
    while category_index is None:
        category_index = choose_filter(console, CATEGORY_NAMES)
    year = _ask_digits(console, " Enter new published year : ")
    quantity = _ask_digits(console, " Enter new quantity : ")
    author = console.ask(" Enter new author name : ")
    updated = catalog.update(book_id, title, category_index, year, quantity, author)
    console.line()
    console.write(" Change data!\n")
    console.double_line()
    console.wait_for_exit()
    return updated


def delete_book_prompt(console: Console, catalog: Catalog) -> Optional[Book]:
    """Ask for a book id and remove that book."""
    console.double_line()
    console.write(f"{'delete book':>30}\n")
    console.double_line()
    book_id = console.ask_token(" Enter the book Id here : ")
    checked = _valid_id(console, book_id)
    if checked is None:
        return None
    category_index, year = checked
    if not catalog.shelf(category_index, year_to_index(year)):
        _fail(console, "!!!Error: No books found in the specified category and year.")
        return None
    try:
        removed = catalog.remove(book_id)
    except CatalogError:
        console.clear()
        console.write(" !!! The ID Book is not found\n")
        console.line()
        removed = None
    else:
        console.double_line()
        console.write(f" The book [{book_id}] has been removed\n")
        console.double_line()
    console.wait_for_exit()
    return removed