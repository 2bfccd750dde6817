# logger_utils.py - logging setup and timing metrics

import logging
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

metrics_logger = logging.getLogger("charmarkov.metrics")


def configure(level: str = "WARNING", stream=None) -> None:
    """
    Attach one stream handler to the package logger.
    Calling it again just changes the level.
    """
    root = logging.getLogger("charmarkov")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)


class Log:
    """Metric helpers on top of the `charmarkov.metrics` logger."""

    @staticmethod
    def metric(tag: str, value, unit: str = ""):
        """
        Record a metric (timing, counts etc).
        Example: training done: 0.012s
        """
        metrics_logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str):
        """
        Measure a code block:
            with Log.time_block("training"):
                model.train(text)
        The elapsed seconds are logged on exit and kept on the timer.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed: Optional[float] = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
        return False
