# charmarkov/core/language_model.py
"""
LanguageModel - fixed-order character-level Markov model.

Purpose:
 - Wires Trainer, ModelStore, normalizer, sampler and Generator together.
 - Owns the random number generator: a seeded `random.Random` gives
   reproducible output (debugging, tests), an unseeded one gives fresh text
   on every run.
 - dump()/__str__ render the learned tables for inspection.

e.g.
    lm = LanguageModel(3, seed=20)
    lm.train_file("corpus.txt")
    print(lm.generate("The", 200))
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from charmarkov.core.char_data import FrequencyTable
from charmarkov.core.generator import Generator
from charmarkov.core.model_store import ModelStore
from charmarkov.core.normalizer import normalize
from charmarkov.core.protocols import CharCountRecord, RandomSource
from charmarkov.core.sampler import sample
from charmarkov.core.trainer import Trainer
from charmarkov.utils.config_manager import ConfigError, check_window_length
from charmarkov.utils.corpus_reader import iter_chars

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Public API:
      - train(corpus)
      - train_file(path, encoding="utf-8")
      - generate(seed_text, target_length)
      - calculate_probabilities(table), get_random_char(table)
      - dump() / str(model), to_records()
    """

    def __init__(self, window_length: int, seed: Optional[int] = None,
                 rng: Optional[RandomSource] = None) -> None:
        self._window_length = check_window_length(window_length)
        if rng is not None and seed is not None:
            raise ConfigError("pass either seed or rng, not both")
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self._store = ModelStore(self._window_length)
        self._trainer = Trainer(self._store)
        self._generator = Generator(self._store, self.rng)

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def store(self) -> ModelStore:
        return self._store

    # Training --------------------------------------------------------------
    def train(self, corpus: Iterable[str]) -> int:
        """Learn from a str or an iterable of text chunks; returns transitions observed."""
        return self._trainer.train(corpus)

    def train_file(self, path: str, encoding: str = "utf-8") -> int:
        return self._trainer.train(iter_chars(path, encoding=encoding))

    @staticmethod
    def calculate_probabilities(table: FrequencyTable) -> None:
        normalize(table)

    # Generation ------------------------------------------------------------
    def get_random_char(self, table: FrequencyTable) -> str:
        res = sample(table, self.rng.random())
        if res.fallback:
            logger.debug("sampling fell back to last entry %r", res.character)
        return res.character

    def generate(self, seed_text: str, target_length: int) -> str:
        """
        Extend seed_text by up to target_length characters.
        Seeds shorter than the window come back unchanged; generation stops
        early once the trailing window was never seen in training.
        """
        return self._generator.generate(seed_text, target_length)

    # Introspection ---------------------------------------------------------
    def to_records(self) -> List[CharCountRecord]:
        return [
            CharCountRecord(
                window=window,
                character=e.character,
                count=e.count,
                probability=e.probability,
                cumulative_probability=e.cumulative_probability,
            )
            for window, table in self._store.items()
            for e in table
        ]

    def dump(self) -> str:
        return self._store.dump()

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"LanguageModel(window_length={self._window_length}, windows={len(self._store)})"
