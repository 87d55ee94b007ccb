"""Line-oriented terminal input and output used by the desk menus."""

from __future__ import annotations

import subprocess
import sys
import time
from typing import Optional, Sequence, TextIO

LINE_WIDTH = 50
_DEFAULT_CLEAR = ("clear",)


class Console:
    """Reads answers and writes screens, the way the menus expect."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        clear_command: Optional[Sequence[str]] = _DEFAULT_CLEAR,
        pause_seconds: float = 1.0,
    ) -> None:
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self.clear_command = tuple(clear_command) if clear_command else None
        self.pause_seconds = pause_seconds
        self._pending = ""

    # -- output -----------------------------------------------------------

    def write(self, text: str) -> None:
        """Write text as is and flush it."""
        self.output.write(text)
        self.output.flush()

    def line(self) -> None:
        """Write a single dashed separator."""
        self.rule(LINE_WIDTH)

    def double_line(self) -> None:
        """Write a double separator."""
        self.double_rule(LINE_WIDTH)

    def rule(self, width: int) -> None:
        """Write a dashed separator of the given width."""
        self.write("-" * width + "\n")

    def double_rule(self, width: int) -> None:
        """Write a double separator of the given width."""
        self.write("=" * width + "\n")

    def clear(self) -> None:
        """Clear the terminal by running the configured command, if any."""
        self.output.flush()
        if not self.clear_command:
            return
        try:
            subprocess.run(list(self.clear_command), check=False)
        except OSError:
            pass

    def pause(self) -> None:
        """Wait briefly so a message can be read."""
        if self.pause_seconds > 0:
            time.sleep(self.pause_seconds)

    # -- input ------------------------------------------------------------

    def _fill(self) -> None:
        chunk = self.input.readline()
        if not chunk:
            raise EOFError("no more input")
        self._pending += chunk

    def _skip_space(self) -> None:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                return
            self._fill()

    def _read_char(self) -> str:
        self._skip_space()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def ask(self, prompt: str) -> str:
        """Ask for a whole line, skipping leading blanks and empty lines."""
        self.write(prompt)
        self._skip_space()
        text, sep, rest = self._pending.partition("\n")
        self._pending = sep + rest
        return text.rstrip("\r")

    def ask_token(self, prompt: str) -> str:
        """Ask for one whitespace-delimited word."""
        self.write(prompt)
        self._skip_space()
        end = 0
        while end < len(self._pending) and not self._pending[end].isspace():
            end += 1
        token, self._pending = self._pending[:end], self._pending[end:]
        return token

    def ask_yes_no(self, prompt: str) -> bool:
        """Repeat the prompt until a Y or N answer is given."""
        while True:
            self.write(prompt)
            answer = self._read_char()
            if answer in "Yy":
                return True
            if answer in "Nn":
                return False

    def wait_for_exit(self) -> None:
        """Wait until the user enters E, then clear the screen."""
        while self._read_exit_key() not in "Ee":
            pass
        self.clear()

    def _read_exit_key(self) -> str:
        self.write(" Enter [E] to Exit : ")
        return self._read_char()


def check_num(text: str) -> int:
    """Return the menu choice 1-9 for a single digit, otherwise 0."""
    if len(text) == 1 and "1" <= text <= "9":
        return int(text)
    return 0