# trainer.py - sliding-window frequency accumulation over a corpus

from __future__ import annotations
from itertools import islice
from typing import Iterable
import logging

from .model_store import ModelStore
from .normalizer import normalize

logger = logging.getLogger(__name__)


class Trainer:
    """
    Streams a corpus one character at a time and records, for every window of
    `store.window_length` characters, which character followed it.
    """

    def __init__(self, store: ModelStore) -> None:
        self.store = store

    def train(self, corpus: Iterable[str]) -> int:
        """
        Accumulate counts from `corpus` (a str or any iterable of text chunks)
        into the store, then normalize every table.
        Returns the number of (window -> next char) transitions observed.
        A corpus shorter than the window records nothing.
        """
        # items may be longer chunks (lines, blocks); flatten to single chars
        chars = (c for chunk in corpus for c in chunk)
        window = "".join(islice(chars, self.store.window_length))
        if len(window) < self.store.window_length:
            logger.info("corpus shorter than window (%d chars), nothing learned", len(window))
            return 0

        seen = 0
        for c in chars:
            self.store.table_for(window).update(c)
            window = window[1:] + c
            seen += 1

        for table in self.store.tables():
            normalize(table)

        logger.info("trained on %d transitions, %d windows", seen, len(self.store))
        return seen
