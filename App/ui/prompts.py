"""Line-oriented console prompts.

AIDEV-NOTE: Input and output streams are injectable so the interactive
protocol can be scripted in tests. Prompts are written without a trailing
newline and flushed before reading, matching what an operator sees at a
terminal.
"""

import sys
from typing import Callable, TextIO

from image_processing.remap import parse_rgba


class InputClosed(Exception):
    """Raised when the operator's input stream ends mid-session."""


class Console:
    """Console I/O for the interactive session."""

    def __init__(
        self,
        read_line: Callable[[], str] = input,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.read_line = read_line
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def say(self, message: str = ""):
        print(message, file=self.out)

    def warn(self, message: str):
        print(message, file=self.err)

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the trimmed reply.

        Raises:
            InputClosed: If the input stream is exhausted
        """
        print(prompt, end="", file=self.out, flush=True)
        try:
            line = self.read_line()
        except (EOFError, StopIteration) as e:
            raise InputClosed("Input ended before a reply was given") from e
        return line.strip()

    def ask_rgba(self, prompt: str) -> "tuple[int, int, int, int] | None":
        """Ask for a replacement color.

        Returns:
            RGBA tuple, or None for a blank or invalid reply. Invalid
            replies print a warning.
        """
        reply = self.ask(prompt)
        if not reply:
            return None
        color = parse_rgba(reply)
        if color is None:
            self.warn("Invalid input, keeping original.")
        return color


def scripted(lines) -> Callable[[], str]:
    """Build a ``read_line`` callable that replays ``lines``.

    Raises EOFError once the lines run out, like ``input()`` at end of file.
    """
    iterator = iter(lines)

    def read_line() -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return read_line
