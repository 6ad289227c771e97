"""Bounded, de-duplicated history of generated commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

HISTORY_LIMIT = 10


def record_to_history(history: Sequence[str], command: str, *, limit: int = HISTORY_LIMIT) -> list[str]:
    """Return a new history with ``command`` at the front.

    An existing occurrence is moved rather than duplicated and the result is
    truncated to ``limit`` entries, dropping the oldest.
    """
    return [command, *(entry for entry in history if entry != command)][:limit]


def clear_history(_history: Sequence[str] | None = None) -> list[str]:
    """Return an empty history."""
    return []


class CommandHistory:
    """Most-recent-first list of commands the user copied."""

    def __init__(self, entries: Sequence[str] = (), *, limit: int = HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("History limit must be greater than 0")
        self.limit = limit
        self._entries: list[str] = []
        for entry in reversed(entries):
            self.record(entry)

    def record(self, command: str) -> None:
        """Put ``command`` at the front."""
        self._entries = record_to_history(self._entries, command, limit=self.limit)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries = clear_history(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"CommandHistory({self._entries!r})"


__all__ = ["CommandHistory", "clear_history", "record_to_history"]
