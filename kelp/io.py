"""Line-oriented terminal I/O for the REPL. Never used by the evaluator."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from kelp.config import get_prompt


class UserIO:
    def __init__(
        self,
        prefix: Optional[str] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.prefix = prefix if prefix is not None else get_prompt()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def read_line(self) -> Optional[str]:
        """Next input line without its newline, or None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def write_line(self, line: str) -> None:
        self.stdout.write(line + "\n")

    def write(self, text: str) -> None:
        # no newline, so flush for the prompt to show up
        self.stdout.write(text)
        self.stdout.flush()

    def greet(self) -> None:
        self.write(self.prefix)
