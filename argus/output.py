"""Line-atomic console sink shared by the chat and activity feeds."""

from __future__ import annotations

import sys
import threading
from typing import TextIO


class ConsoleSink:
    """Writes complete lines to a text stream.

    Each line is emitted with a single ``write`` call under a lock, so output
    from concurrent producers interleaves by whole lines only.

    Attributes:
        stream: Destination stream. Defaults to ``sys.stdout`` resolved at
            write time so that test capture and redirection keep working.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(f"{line}\n")
            stream.flush()

    def write_banner(self, title: str, *lines: str) -> None:
        """Write a titled block framed by dashed rules as one atomic unit."""
        rule = "-" * 49
        header = f" {title} ".center(len(rule), "-")
        block = "\n".join([header, *lines, rule])
        self.write_line(block)
