"""Per-session count of the moves the player has made."""
from __future__ import annotations
from collections import Counter
from typing import List, Optional, Tuple


class FrequencyTracker:
    """Counts player choices for one game.

    Ties are broken by the order in which choices were first recorded, so the
    earliest of the equally common moves is reported first.
    """

    def __init__(self):
        self._counts: Counter = Counter()

    def record(self, choice: str) -> None:
        self._counts[choice] += 1

    def count(self, choice: str) -> int:
        return self._counts[choice]

    def most_frequent(self) -> Optional[str]:
        if not self._counts:
            return None
        return self._counts.most_common(1)[0][0]

    def report(self) -> List[Tuple[str, int]]:
        """(choice, count) pairs, most frequent first."""
        return self._counts.most_common()

    def reset(self) -> None:
        self._counts.clear()

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self):
        return len(self._counts)
