# corpus_reader.py - reads a training corpus as an ordered character stream

from typing import Iterator

BLOCK_SIZE = 64 * 1024


def iter_chars(path: str, encoding: str = "utf-8", block_size: int = BLOCK_SIZE) -> Iterator[str]:
    """Yield the characters of a text file in order; the file is read in blocks."""
    with open(path, "r", encoding=encoding, newline="") as f:
        while True:
            block = f.read(block_size)
            if not block:
                return
            yield from block


def read_corpus(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()
