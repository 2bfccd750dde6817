# sampler.py - picks a character from a normalized FrequencyTable

from __future__ import annotations
from dataclasses import dataclass

from .char_data import FrequencyTable


@dataclass(frozen=True)
class SampleResult:
    """
    Outcome of one draw.
    fallback is True when no cumulative probability reached the draw (float
    shortfall just below 1.0) and the table's last character was used instead.
    """
    character: str
    fallback: bool = False


def sample(table: FrequencyTable, draw: float) -> SampleResult:
    """
    Return the first character whose cumulative probability is >= draw.

    `draw` is expected in [0, 1). The table is not modified.
    """
    last = None
    for entry in table:
        if entry.cumulative_probability >= draw:
            return SampleResult(entry.character)
        last = entry
    if last is None:
        raise ValueError("cannot sample from an empty frequency table")
    return SampleResult(last.character, fallback=True)
