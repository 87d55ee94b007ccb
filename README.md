# librarydesk

A menu-driven library desk for the terminal. Librarians manage the book
catalogue and the member list. Members search for books, borrow them, return
them and join reservation queues. Everything is stored in plain CSV files.

## Installation

```
pip install .
```

## Running

```
librarydesk
```

Options:

| Option             | Effect                                                        |
|--------------------|---------------------------------------------------------------|
| `--data-dir DIR`   | directory holding the CSV files (default `DATA`; created if missing) |
| `--no-clear`       | do not run `clear` between screens                            |
| `--pause SECONDS`  | how long short messages stay up (default `1.0`)               |

The data directory holds these files. A file that is missing is reported and
its part of the library starts out empty.

| File                     | Contents                                                    |
|--------------------------|-------------------------------------------------------------|
| `Book-ID.csv`            | the catalogue: id, title, author, category, year, quantity, status, borrow count |
| `member.csv`             | members: ID, first name, last name, phone, email            |
| `borrow_history.csv`     | one line per loan: member, book, title, `Borrowed` or `Returned` |
| `Borrowing_Queue.csv`    | reservation queues: member, book, title, `Reserved`         |

The main menu offers two roles:

- **Librarian**: add, edit and delete books; list all books or search them;
  register and update members and list them; view one member's borrowing
  history; list current loans and all reservation queues; see the five most
  borrowed books and the three members with the most returns.
- **Member**: sign in with a member ID; list all books; search titles and ids
  (case-sensitive substring match) with optional category and year-range
  filters, then borrow a book, up to three at a time, or join its reservation
  queue when no copy is left; return a held book. At sign-in, for each book
  whose queue has you at the front you are asked whether to borrow it, and you
  leave that queue either way.

Changes are written back to the CSV files when a menu is left and when the
program exits, including when input ends or Ctrl-C is pressed.

## Book identifiers

A book id has the form `FT01-00001-2014`: the category code, a running number
within the category and year range, and the publication year. The categories
are Fiction, History, Science, Biography & Autography, Psychology, Religion,
Business & Economics, Computers, Cooking, Mathematics and Comics & Graphic
Novels. Year ranges are below 1975, ten-year bands from 1975 to 2025, and
above 2025. Editing a book so that its category or year range changes moves it
to the new shelf under a new id.

## Using the library from Python

```python
from librarydesk.state import DataPaths, load_state

state = load_state(DataPaths.from_dir("DATA"))
book = state.catalog.add_book(0, 2014, "A Title", "An Author", 3)
print(book.id)          # FT01-00001-2014 on an empty shelf
state.save()
```

- `librarydesk.catalog`: `Catalog` (`add_book`, `find`, `remove`, `update`,
  `search`, `load_csv`, `save_csv`), `Book`, `CatalogError`, and the helpers
  `year_to_index`, `parse_book_id`, `is_integer`, `parse_filter`.
- `librarydesk.members`: `MemberDirectory` (`insert`, `find`, `load`, `save`,
  iteration in id order), `Member`, `HistoryEntry`, `read_history`.
- `librarydesk.borrowing`: `borrow` and `give_back` (raising `BorrowError`),
  `reservations_for`, and the file helpers `load_borrow_history`,
  `append_history`, `mark_returned`, `increment_borrow_count`, `load_queue`,
  `save_queue`.
- `librarydesk.reports`: `top_borrowed` and `top_returners`, read from the
  catalogue and history files.
- `librarydesk.state`: `DataPaths`, `LibraryState` and `load_state`.
- `librarydesk.console`: `Console`, the line-oriented input and output the
  menus use, and `check_num`.

## What it does not do

Members cannot be deleted, and signing in asks only for a member ID, with no
password. There are no due dates or fines. The CSV files are not locked, so
two desks must not run on the same data directory at once.

## Tests

```
pip install .[test]
pytest
```