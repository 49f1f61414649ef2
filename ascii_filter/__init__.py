"""Byte-level non-ASCII filter for editor save hooks.

The names below resolve lazily so ``python -m ascii_filter`` only imports
what the pipeline needs.
"""

__all__: list[str] = []


def __getattr__(name: str):
    if name in ("filter_bytes", "RemovedPosition", "FilterResult"):
        from .scanner import filter_bytes, RemovedPosition, FilterResult

        return {
            "filter_bytes": filter_bytes,
            "RemovedPosition": RemovedPosition,
            "FilterResult": FilterResult,
        }[name]
    if name == "run_filter":
        from .cli import run_filter

        return run_filter
    if name == "FilterIOError":
        from .errors import FilterIOError

        return FilterIOError
    raise AttributeError(f"module 'ascii_filter' has no attribute {name!r}")
