# model_store.py - window -> FrequencyTable mapping for one trained model

from __future__ import annotations
from typing import Dict, ItemsView, Iterator, Optional, ValuesView

from .char_data import FrequencyTable


class ModelStore:
    """
    Maps every observed window (exactly `window_length` chars) to its
    FrequencyTable. Written by the Trainer, read by the Generator.
    """

    def __init__(self, window_length: int) -> None:
        self.window_length = window_length
        self._tables: Dict[str, FrequencyTable] = {}

    def table_for(self, window: str) -> FrequencyTable:
        """Fetch the table for `window`, creating an empty one if needed."""
        table = self._tables.get(window)
        if table is None:
            if len(window) != self.window_length:
                raise ValueError(
                    f"window {window!r} has length {len(window)}, expected {self.window_length}"
                )
            table = FrequencyTable()
            self._tables[window] = table
        return table

    def get(self, window: str) -> Optional[FrequencyTable]:
        return self._tables.get(window)

    def tables(self) -> ValuesView[FrequencyTable]:
        return self._tables.values()

    def items(self) -> ItemsView[str, FrequencyTable]:
        return self._tables.items()

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def __getitem__(self, window: str) -> FrequencyTable:
        return self._tables[window]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def dump(self) -> str:
        """Human readable listing, one `window : [c(count,p,cp), ...]` line per key."""
        return "".join(f"{w} : {t}\n" for w, t in self._tables.items())
