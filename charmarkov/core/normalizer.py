# normalizer.py - turns raw counts into probability / cumulative probability

from __future__ import annotations
from dataclasses import replace
import logging

from .char_data import FrequencyTable

logger = logging.getLogger(__name__)


def normalize(table: FrequencyTable) -> None:
    """
    Set probability and cumulative_probability on every record of `table`, in place.

    Records are walked in table (first-seen) order, so cumulative_probability is a
    non-decreasing step function ending at 1.0 (up to float rounding).
    Empty tables and zero totals are left untouched.
    """
    if len(table) == 0:
        return
    total = table.total_count()
    if total == 0:
        logger.debug("skipping table with zero total count")
        return

    cp = 0.0
    for entry in table:
        p = entry.count / total
        cp += p
        table.put(replace(entry, probability=p, cumulative_probability=cp))
