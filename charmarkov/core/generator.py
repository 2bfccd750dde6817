# generator.py - extends a seed text by repeated sampling from a trained store

from __future__ import annotations
import logging

from .model_store import ModelStore
from .protocols import RandomSource
from .sampler import sample

logger = logging.getLogger(__name__)


class Generator:
    """
    Text extension driver.

    The lookup key for each step is the trailing `window_length` characters of
    the text so far. Generation stops early, without padding, as soon as that
    window has no recorded continuation.
    """

    def __init__(self, store: ModelStore, rng: RandomSource) -> None:
        self.store = store
        self.rng = rng

    def generate(self, seed_text: str, target_length: int) -> str:
        n = self.store.window_length
        if len(seed_text) < n:
            return seed_text

        out = list(seed_text)
        for _ in range(max(target_length, 0)):
            window = "".join(out[-n:])
            table = self.store.get(window)
            if table is None:
                logger.debug("no continuation for %r after %d chars", window, len(out) - len(seed_text))
                break
            res = sample(table, self.rng.random())
            if res.fallback:
                logger.debug("sampling fell back to last entry %r for %r", res.character, window)
            out.append(res.character)
        return "".join(out)
