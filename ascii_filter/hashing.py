from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ascii_filter.errors import FilterIOError

logger = logging.getLogger(__name__)


def content_digest(data: bytes) -> str:
    """Return the SHA-256 hex digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


@dataclass(frozen=True)
class FileContent:
    path: Path
    data: bytes
    digest: str


def read_content(path: Union[str, Path]) -> FileContent:
    target = Path(path)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise FilterIOError(target, "read", exc.strerror or str(exc)) from exc
    digest = content_digest(data)
    logger.debug("Read %d bytes from %s (sha256=%s)", len(data), target, digest)
    return FileContent(path=target, data=data, digest=digest)
