"""A terminal library desk for books, members, loans and reservations kept in CSV files."""

__version__ = "0.1.0"