"""Command-line entry point: strip non-ASCII bytes from one file.

Usage:
    ascii-filter <path>
    ascii-filter --dry-run <path>

Standard output lists ``<line> <column>`` for every removed byte and nothing
else; diagnostics go to standard error.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from ascii_filter.config import load_settings
from ascii_filter.errors import FilterIOError
from ascii_filter.hashing import content_digest, read_content
from ascii_filter.log import setup_logging
from ascii_filter.report import emit_positions
from ascii_filter.scanner import FilterResult, RemovedPosition, filter_bytes, is_clean, shannon_entropy
from ascii_filter.writer import write_if_changed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSummary:
    removed_count: int
    removed_entropy: float
    cleaned_digest: str


@dataclass(frozen=True)
class FilterOutcome:
    path: Path
    positions: Tuple[RemovedPosition, ...]
    changed: bool
    summary: FilterSummary

    @property
    def state(self) -> str:
        return "filtered" if self.changed else "clean"


def run_filter(path: Union[str, Path], *, dry_run: bool = False, atomic: Optional[bool] = None) -> FilterOutcome:
    """Read, filter and conditionally rewrite ``path``.

    Raises FilterIOError on read or write failure; nothing is reported in
    that case.
    """
    if atomic is None:
        atomic = load_settings().atomic_write
    content = read_content(path)
    if is_clean(content.data):
        logger.debug("%s is clean", content.path)
        result = FilterResult(content.data, (), b"")
        cleaned_digest = content.digest
    else:
        result = filter_bytes(content.data)
        cleaned_digest = content_digest(result.cleaned)
    summary = FilterSummary(
        removed_count=len(result.removed),
        removed_entropy=shannon_entropy(result.removed),
        cleaned_digest=cleaned_digest,
    )
    if result.changed:
        logger.info(
            "Filtered %d non-ASCII bytes from %s (entropy=%.4f, sha256=%s)",
            summary.removed_count,
            content.path,
            summary.removed_entropy,
            summary.cleaned_digest,
        )
    changed = write_if_changed(
        content, result.cleaned, cleaned_digest=cleaned_digest, atomic=atomic, dry_run=dry_run
    )
    return FilterOutcome(path=content.path, positions=result.positions, changed=changed, summary=summary)


def _parse_args(argv: Optional[list[str]] = None, default_level: str = "WARNING") -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ascii-filter",
        description="Remove non-ASCII bytes from a file and print their positions",
    )
    parser.add_argument("path", help="File to filter in place")
    parser.add_argument("--dry-run", action="store_true", help="Report positions without rewriting the file")
    parser.add_argument("--log-level", default=default_level, help=f"Logging level for stderr (default: {default_level})")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    settings = load_settings()
    args = _parse_args(argv, default_level=settings.log_level)
    setup_logging(args.log_level, settings.log_file)
    try:
        outcome = run_filter(args.path, dry_run=args.dry_run, atomic=settings.atomic_write)
    except FilterIOError as exc:
        logger.error("%s", exc)
        return 1
    emit_positions(outcome.positions)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
