import pytest

from librarydesk.catalog import (
    CATEGORY_CODES,
    CATEGORY_NAMES,
    CSV_HEADER,
    YEAR_NAMES,
    Book,
    Catalog,
    CatalogError,
    is_integer,
    parse_book_id,
    parse_filter,
    year_to_index,
)


@pytest.mark.parametrize(
    "year, band",
    [(1900, "below 1975"), (1980, "1975-1985"), (2014, "2005-2015"),
     (2020, "2015-2025"), (2100, "above 2025")],
)
def test_year_to_index_bands(year, band):
    assert YEAR_NAMES[year_to_index(year)] == band


def test_year_to_index_truncates_toward_zero_just_below_1975():
    assert year_to_index(1970) == year_to_index(1980)


def test_parse_book_id():
    assert parse_book_id("FT01-00001-2014") == (0, 2014, 1)
    assert parse_book_id("CG11-00042-1999") == (10, 1999, 42)


def test_is_integer():
    assert is_integer("123")
    assert not is_integer("")
    assert not is_integer("12a")
    assert not is_integer("-1")


def test_parse_filter():
    assert parse_filter("0", 7) is None
    assert parse_filter("1", 7) == 0
    assert parse_filter("7", 7) == 6
    with pytest.raises(CatalogError):
        parse_filter("8", 7)
    with pytest.raises(CatalogError):
        parse_filter("x", 7)


def test_add_book_assigns_sequential_ids():
    catalog = Catalog()
    first = catalog.add_book(0, 2014, "Dune", "Herbert", 3)
    second = catalog.add_book(0, 2010, "Emma", "Austen", 1)
    assert first.id == "FT01-00001-2014"
    assert parse_book_id(second.id) == (0, 2010, 2)
    assert first.category == CATEGORY_NAMES[0]
    assert first.available is True and first.borrow_count == 0
    assert catalog.shelf(0, year_to_index(2014)) == [first, second]


def test_add_book_rejects_bad_category():
    with pytest.raises(CatalogError):
        Catalog().add_book(len(CATEGORY_NAMES), 2000, "t", "a", 1)


def test_iteration_and_find():
    catalog = Catalog()
    a = catalog.add_book(2, 1990, "Cosmos", "Sagan", 2)
    b = catalog.add_book(0, 1990, "Ulysses", "Joyce", 1)
    assert list(catalog) == [b, a]
    assert catalog.find(a.id) is a
    assert catalog.find("nothing") is None
    assert sum(len(books) for _, _, books in catalog.shelves()) == 2


def test_remove():
    catalog = Catalog()
    book = catalog.add_book(1, 1960, "Rome", "Beard", 1)
    assert catalog.remove(book.id) is book
    assert catalog.find(book.id) is None
    with pytest.raises(CatalogError):
        catalog.remove(book.id)


def test_remove_errors():
    catalog = Catalog()
    catalog.add_book(1, 1960, "Rome", "Beard", 1)
    with pytest.raises(CatalogError, match="category"):
        catalog.remove("XX99-00001-1960")
    with pytest.raises(CatalogError, match="not found"):
        catalog.remove(CATEGORY_CODES[1] + "-00009-1960")


def test_update_in_place_keeps_id():
    catalog = Catalog()
    book = catalog.add_book(0, 2014, "Dune", "Herbert", 3)
    updated = catalog.update(book.id, "Dune II", 0, 2012, 5, "F. Herbert")
    assert updated is book
    assert (book.id, book.title, book.year, book.quantity, book.author) == (
        book.id, "Dune II", 2012, 5, "F. Herbert")


def test_update_moves_to_new_shelf():
    catalog = Catalog()
    book = catalog.add_book(0, 2014, "Dune", "Herbert", 3)
    moved = catalog.update(book.id, "Dune", 2, 1980, 3, "Herbert")
    assert catalog.find(book.id) is None
    assert moved.id.startswith(CATEGORY_CODES[2])
    assert catalog.shelf(2, year_to_index(1980)) == [moved]


def test_update_unknown_id():
    with pytest.raises(CatalogError):
        Catalog().update("FT01-00001-2014", "t", 0, 2014, 1, "a")


def test_search_with_filters():
    catalog = Catalog()
    a = catalog.add_book(0, 2014, "Python Tricks", "x", 1)
    b = catalog.add_book(7, 2014, "Python Basics", "y", 1)
    c = catalog.add_book(7, 1980, "C Basics", "z", 1)
    assert catalog.search("Python") == [a, b]
    assert catalog.search("Basics", category_index=7) == [c, b]
    assert catalog.search("Basics", year_index=year_to_index(1980)) == [c]
    assert catalog.search(a.id) == [a]


def test_save_and_load_round_trip(tmp_path):
    catalog = Catalog()
    a = catalog.add_book(0, 2014, "Dune", "Herbert", 3)
    b = catalog.add_book(9, 1950, "Calculus", "Spivak", 0)
    b.borrow_count = 4
    path = tmp_path / "books.csv"
    catalog.save_csv(path)
    assert path.read_text().splitlines()[0] == CSV_HEADER
    loaded = Catalog()
    assert loaded.load_csv(path) == 2
    again = {book.id: book for book in loaded}
    assert again[a.id].title == "Dune" and again[a.id].quantity == 3
    assert again[b.id].borrow_count == 4
    assert again[b.id].available is False