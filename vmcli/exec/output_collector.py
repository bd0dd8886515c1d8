"""
Output collector for line-oriented process output.

One collector is owned by one stream reader: the reader pushes each line it
reads through receive(), and the invocation reads the joined text back with
finalize() once the reader has finished.
"""

import io
import os
from typing import Optional


class OutputCollector:
    """
    Accumulates lines delivered by a stream reader into a single string.

    Each received line is written followed by the line terminator, so a child
    that printed "1.2.3" collects as "1.2.3\\n" on POSIX hosts.
    """

    def __init__(self, newline: str = os.linesep):
        """
        Initialize output collector.

        Args:
            newline: Terminator appended after every received line
        """
        self.newline = newline
        self._buffer = io.StringIO()
        self._final: Optional[str] = None

    def receive(self, line: str) -> None:
        """
        Append a line followed by the line terminator.

        Lines arriving after close() are dropped; a reader can outlive an
        abandoned invocation.
        """
        if self._buffer.closed:
            return
        self._buffer.write(line)
        self._buffer.write(self.newline)

    def finalize(self) -> str:
        """
        Flush and return everything received so far.

        Safe to call more than once; also returns the last result after close().
        """
        if self._buffer.closed:
            return self._final or ""

        self._buffer.flush()
        self._final = self._buffer.getvalue()
        return self._final

    @property
    def closed(self) -> bool:
        return self._buffer.closed

    def close(self) -> None:
        """Release the buffer."""
        if not self._buffer.closed:
            self._final = self._buffer.getvalue()
            self._buffer.close()

    def __enter__(self) -> "OutputCollector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
