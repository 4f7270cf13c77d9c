"""Command history kept by the interactive shell."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

HISTORY_SIZE = 1024


class History:
    """A bounded record of the lines typed into the shell, oldest first."""

    def __init__(self, capacity: int = HISTORY_SIZE) -> None:
        self._lines: deque[str] = deque(maxlen=capacity)

    def add(self, line: str) -> None:
        """Record a line, without its line ending."""
        self._lines.append(line.rstrip("\r\n"))

    def last(self, count: int) -> list[str]:
        """Return up to count lines before the newest one, newest first.

        The newest line is skipped because it is normally the history
        command that asked for the listing.
        """
        earlier = list(self._lines)[:-1]
        if count <= 0:
            return []
        return earlier[::-1][:count]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)