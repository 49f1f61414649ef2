from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ascii_filter.scanner import RemovedPosition


def format_position(position: RemovedPosition) -> str:
    return f"{position.line} {position.column}"


def emit_positions(positions: Iterable[RemovedPosition], stream: Optional[TextIO] = None) -> int:
    """Write one ``<line> <column>`` line per position; return how many were written."""
    out = stream if stream is not None else sys.stdout
    count = 0
    for position in positions:
        out.write(format_position(position) + "\n")
        count += 1
    if count:
        out.flush()
    return count
