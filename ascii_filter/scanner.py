from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Tuple

ASCII_MAX = 0x7F
NEWLINE = 0x0A


@dataclass(frozen=True)
class RemovedPosition:
    line: int
    column: int


@dataclass(frozen=True)
class FilterResult:
    cleaned: bytes
    positions: Tuple[RemovedPosition, ...]
    removed: bytes

    @property
    def changed(self) -> bool:
        return bool(self.positions)


def filter_bytes(data: bytes) -> FilterResult:
    """Drop every byte above 0x7F and record where each one was.

    Lines and columns are 1-indexed. Columns count bytes, removed bytes
    included, so a two-byte UTF-8 character at the start of a line reports
    columns 1 and 2. Only LF ends a line.
    """
    cleaned = bytearray()
    removed = bytearray()
    positions = []
    line = 1
    column = 1
    for b in data:
        if b > ASCII_MAX:
            positions.append(RemovedPosition(line, column))
            removed.append(b)
            column += 1
            continue
        cleaned.append(b)
        if b == NEWLINE:
            line += 1
            column = 1
        else:
            column += 1
    return FilterResult(bytes(cleaned), tuple(positions), bytes(removed))


def is_clean(data: bytes) -> bool:
    return data.isascii()


def shannon_entropy(data: bytes) -> float:
    """Return the Shannon entropy of ``data`` in bits per byte."""
    if not data:
        return 0.0
    total = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy
