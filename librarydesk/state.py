"""The data files of a library and everything loaded from them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from librarydesk.borrowing import load_borrow_history, load_queue, save_queue
from librarydesk.catalog import Catalog
from librarydesk.members import MemberDirectory

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DataPaths:
    """Where the catalogue, members, history and queue are kept."""

    books: Path
    members: Path
    history: Path
    queue: Path

    @classmethod
    def from_dir(cls, data_dir: PathLike = "DATA") -> "DataPaths":
        """The standard file names inside one data directory."""
        base = Path(data_dir)
        return cls(
            books=base / "Book-ID.csv",
            members=base / "member.csv",
            history=base / "borrow_history.csv",
            queue=base / "Borrowing_Queue.csv",
        )


@dataclass
class LibraryState:
    """Catalogue and members held in memory together with their file locations."""

    paths: DataPaths
    catalog: Catalog = field(default_factory=Catalog)
    members: MemberDirectory = field(default_factory=MemberDirectory)

    def save(self) -> None:
        """Write the catalogue, the reservation queues and the members back."""
        self.catalog.save_csv(self.paths.books)
        save_queue(self.paths.queue, self.catalog)
        self.members.save(self.paths.members)


def load_state(paths: DataPaths) -> LibraryState:
    """Load every data file that exists; a missing one leaves its part empty."""
    state = LibraryState(paths)
    steps = (
        (paths.books, state.catalog.load_csv),
        (paths.members, state.members.load),
        (paths.history, lambda path: load_borrow_history(path, state.members)),
        (paths.queue, lambda path: load_queue(path, state.catalog)),
    )
    for path, loader in steps:
        try:
            loader(path)
        except OSError as error:
            log.warning("Could not open file %s: %s", path, error)
    return state