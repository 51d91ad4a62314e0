"""Ordered record of round results, written out at the end of a game."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Iterator, List, TextIO, Tuple, Union

from .errors import PersistenceFailure

logger = logging.getLogger(__name__)


class HistoryLog:
    def __init__(self):
        self._entries: List[str] = []

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def dumps(self) -> str:
        """Entries joined by newlines, exactly as they are persisted."""
        return "\n".join(self._entries)

    def persist(self, sink: Union[str, Path, TextIO]) -> None:
        """Write the history to ``sink``.

        ``sink`` is either a path, which is overwritten, or an open text
        stream with a ``write`` method. Write errors are raised as
        PersistenceFailure.
        """
        data = self.dumps()
        try:
            if hasattr(sink, "write"):
                sink.write(data)
            else:
                Path(sink).write_text(data, encoding="utf-8")
        except OSError as e:
            logger.error(f"Saving game history to {sink} failed: {e}")
            raise PersistenceFailure(sink, e) from e
        logger.info(f"Saved {len(self._entries)} history entries to {sink}")

    def display(self, write: Callable[[str], None] = print) -> None:
        if not self._entries:
            return
        write("\nGame History:")
        write("\n".join(self._entries))
        write("")
