"""Start-up menu of the library desk and its command line."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from librarydesk.console import Console, check_num
from librarydesk.librarian import librarian_menu
from librarydesk.member_menu import member_menu
from librarydesk.state import DataPaths, LibraryState, load_state


def _save(console: Console, state: LibraryState) -> None:
    try:
        state.save()
    except OSError as error:
        console.write(f" !!! Error : {error}\n")


def run(console: Console, state: LibraryState) -> None:
    """Run the main menu until Exit is chosen, then save the data."""
    while True:
        console.clear()
        console.double_line()
        console.write(f"{'Welcome to the Library Management System':>45}\n")
        console.double_line()
        console.write(" [1] | Librarian\n")
        console.write(" [2] | Member\n")
        console.write(" [3] | Exit\n")
        console.double_line()
        choice = check_num(console.ask_token(" Please select an option : "))
        console.clear()
        if choice == 1:
            console.write(" Librarian selected . . .\n")
            console.pause()
            librarian_menu(console, state)
        elif choice == 2:
            console.write(" Member selected . . .\n")
            console.pause()
            member_menu(console, state)
        elif choice == 3:
            console.write(" Exiting the program . . .\n")
            console.pause()
            break
        else:
            console.write(" Invalid choice. Please try again . . .\n")
            console.pause()
    _save(console, state)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the data directory and run the desk on the terminal."""
    parser = argparse.ArgumentParser(prog="librarydesk", description="Library desk.")
    parser.add_argument("--data-dir", default="DATA", help="directory holding the CSV files")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen")
    parser.add_argument("--pause", type=float, default=1.0,
                        help="seconds to wait after short messages")
    args = parser.parse_args(argv)

    data_dir = Path(args.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    state = load_state(DataPaths.from_dir(data_dir))
    console = Console(
        clear_command=None if args.no_clear else ("clear",),
        pause_seconds=args.pause,
    )
    try:
        run(console, state)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        _save(console, state)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())