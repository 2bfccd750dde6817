# char_data.py - per-window next-character statistics.

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class CharCount:
    """
    One observed next-character alternative for a window.
    probability / cumulative_probability stay 0.0 until the table is normalized.
    """
    character: str
    count: int = 0
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"{self.character}({self.count},{self.probability!r},{self.cumulative_probability!r})"


class FrequencyTable:
    """
    Ordered collection of CharCount records, one per distinct next character.

    Order is first-seen order. It matters: cumulative probabilities are
    accumulated over it and the sampler walks it.
    """

    __slots__ = ["_entries"]

    def __init__(self) -> None:
        # dicts keep insertion order, which is the table order
        self._entries: Dict[str, CharCount] = {}

    def update(self, ch: str) -> CharCount:
        """Count one more occurrence of `ch`, creating its record on first sight."""
        cur = self._entries.get(ch)
        if cur is None:
            cur = CharCount(ch, 1)
        else:
            cur = replace(cur, count=cur.count + 1)
        self._entries[ch] = cur
        return cur

    def put(self, entry: CharCount) -> None:
        """Replace the record for an already-observed character."""
        if entry.character not in self._entries:
            raise KeyError(f"unknown character {entry.character!r}")
        self._entries[entry.character] = entry

    def get(self, ch: str) -> Optional[CharCount]:
        return self._entries.get(ch)

    def total_count(self) -> int:
        return sum(e.count for e in self._entries.values())

    def characters(self) -> List[str]:
        return list(self._entries)

    def last(self) -> Optional[CharCount]:
        if not self._entries:
            return None
        return next(reversed(self._entries.values()))

    def __iter__(self) -> Iterator[CharCount]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ch: object) -> bool:
        return ch in self._entries

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._entries.values()) + "]"

    def __repr__(self) -> str:
        return f"FrequencyTable({self})"
