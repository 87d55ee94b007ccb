"""Rankings drawn from the catalogue and history files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
MAX_BOOKS = 1000
MAX_MEMBERS = 1000
MAX_ID = 20
UNKNOWN_FIRST = "Unknown"
UNKNOWN_LAST = "Unknow"


@dataclass(frozen=True)
class BookStat:
    """How often one book has been borrowed."""

    id: str
    title: str
    borrowed: int


@dataclass(frozen=True)
class ReturnStat:
    """How many books one member has returned."""

    member_id: str
    returned: int
    first_name: str = UNKNOWN_FIRST
    last_name: str = UNKNOWN_LAST


def _leading_int(text: str):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else None


def _parse_book_line(line: str) -> BookStat:
    book_id, _, rest = line.partition(",")
    book_id = book_id[: MAX_ID - 1]
    fields = rest.rstrip("\n").split(",")
    title = fields[0] if fields else ""
    borrowed = 0
    if (
        len(fields) >= 7
        and all(fields[:3])
        and _leading_int(fields[3]) is not None
        and _leading_int(fields[4]) is not None
        and fields[5]
    ):
        borrowed = _leading_int(fields[6]) or 0
    return BookStat(book_id, title, borrowed)


def load_book_stats(path: PathLike) -> list:
    """Read id, title and borrow count for each book in a catalogue file."""
    stats = []
    with open(path, encoding="utf-8-sig") as handle:
        next(handle, None)
        for line in handle:
            if len(stats) >= MAX_BOOKS:
                break
            if "," not in line:
                continue
            stats.append(_parse_book_line(line))
    return stats


def top_borrowed(path: PathLike, limit: int = 5) -> list:
    """The most borrowed books, highest count first."""
    stats = sorted(load_book_stats(path), key=lambda stat: stat.borrowed, reverse=True)
    return stats[:limit]


def load_member_names(path: PathLike) -> dict:
    """Map member id to (first name, last name) from a member file."""
    names: dict = {}
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for read, line in enumerate(handle):
            if read >= MAX_MEMBERS:
                break
            fields = line.rstrip("\n").split(",")
            if len(fields) >= 3 and all(fields[:3]):
                names.setdefault(fields[0], (fields[1], fields[2]))
    return names


def top_returners(history_path: PathLike, member_path: PathLike, limit: int = 3) -> list:
    """Members with the most returned books, highest count first."""
    counts: dict = {}
    with open(history_path, encoding="utf-8") as handle:
        try:
            names = load_member_names(member_path)
        except OSError as error:
            log.warning("Error opening member file: %s", error)
            names = {}
        next(handle, None)
        for line in handle:
            fields = line.split(",", 3)
            if len(fields) != 4 or not all(fields[:3]):
                continue
            words = fields[3].split()
            if not words or words[0] != "Returned":
                continue
            member_id = fields[0]
            if member_id in counts:
                counts[member_id] += 1
            elif len(counts) < MAX_MEMBERS:
                counts[member_id] = 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    result = []
    for member_id, returned in ranked[:limit]:
        first, last = names.get(member_id, (UNKNOWN_FIRST, UNKNOWN_LAST))
        result.append(ReturnStat(member_id, returned, first, last))
    return result