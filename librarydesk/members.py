"""Library members, kept ordered by id, and their borrowing history file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
MEMBER_HEADER = "ID,FirstName,LastName,Phone,Email"


def _trim(text: str) -> str:
    """Drop trailing blanks, tabs and newlines."""
    return text.rstrip(" \t\n")


@dataclass
class Member:
    """A registered library member and the books they currently hold."""

    id: str
    first_name: str
    last_name: str
    phone: str
    email: str
    borrowed: list = field(default_factory=list, compare=False, repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class HistoryEntry:
    """One line of the borrowing history file."""

    member_id: str
    book_id: str
    title: str
    status: str


class MemberDirectory:
    """Members keyed by id; iteration runs in ascending id order."""

    def __init__(self) -> None:
        self._members: dict = {}

    def insert(self, member: Member) -> bool:
        """Add a member; an id already present is left unchanged. True if added."""
        if member.id in self._members:
            return False
        self._members[member.id] = member
        return True

    def find(self, member_id: str) -> Optional[Member]:
        """Return the member with this id, or None."""
        return self._members.get(member_id)

    def __iter__(self) -> Iterator[Member]:
        for member_id in sorted(self._members):
            yield self._members[member_id]

    def __len__(self) -> int:
        return len(self._members)

    def load(self, path: PathLike) -> int:
        """Add the members listed in a member file; return how many lines were accepted."""
        accepted = 0
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for raw in handle:
                line = _trim(raw)
                if not line:
                    continue
                fields = line.split(",", 4)
                if len(fields) != 5 or not all(fields):
                    log.warning("Invalid data format:  %s", line)
                    continue
                self.insert(Member(*fields))
                accepted += 1
        return accepted

    def save(self, path: PathLike) -> None:
        """Write all members to a member file; nothing is written when there are none."""
        if not self._members:
            return
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(MEMBER_HEADER + "\n")
            for member in self:
                handle.write(
                    f"{member.id},{member.first_name},{member.last_name},"
                    f"{member.phone},{member.email}\n"
                )


def read_history(path: PathLike, member_id: str) -> list:
    """Return the history entries recorded for one member, in file order."""
    entries = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for raw in handle:
            fields = raw.rstrip("\r\n").split(",", 3)
            if len(fields) != 4 or not all(fields):
                continue
            current, book_id, title, status = fields
            if current == member_id:
                entries.append(HistoryEntry(current, book_id, title, status))
    return entries