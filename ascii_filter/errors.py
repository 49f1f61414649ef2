from __future__ import annotations

from pathlib import Path
from typing import Union


class FilterIOError(OSError):
    """Raised when the target file cannot be read or rewritten."""

    def __init__(self, path: Union[str, Path], operation: str, reason: str) -> None:
        self.path = Path(path)
        self.operation = operation
        super().__init__(f"cannot {operation} {self.path}: {reason}")
