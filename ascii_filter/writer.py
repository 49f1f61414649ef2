from __future__ import annotations

import logging
import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import Optional

from ascii_filter.errors import FilterIOError
from ascii_filter.hashing import FileContent, content_digest

logger = logging.getLogger(__name__)

TMP_SUFFIX = ".ascii-filter.tmp"
REPLACE_ATTEMPTS = 5


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary file %s: %s", tmp_path, exc)


def _replace_atomically(path: Path, data: bytes) -> None:
    # os.replace only needs a writable directory; the file itself must be writable too
    if not os.access(path, os.W_OK):
        raise FilterIOError(path, "write", "Permission denied")
    tmp_path = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.name + ".", suffix=TMP_SUFFIX)
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        shutil.copymode(path, tmp_path)
        # PermissionError here is usually a transient lock; retry with backoff
        last_err = None
        for i in range(REPLACE_ATTEMPTS):
            try:
                os.replace(tmp_path, path)
                return
            except PermissionError as e:
                last_err = e
                time.sleep(0.1 * (i + 1))
        raise last_err
    except OSError as exc:
        if tmp_path is not None:
            _discard(tmp_path)
        raise FilterIOError(path, "write", exc.strerror or str(exc)) from exc


def _overwrite_in_place(path: Path, data: bytes) -> None:
    try:
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        raise FilterIOError(path, "write", exc.strerror or str(exc)) from exc


def write_if_changed(
    original: FileContent,
    cleaned: bytes,
    *,
    cleaned_digest: Optional[str] = None,
    atomic: bool = True,
    dry_run: bool = False,
) -> bool:
    """Overwrite ``original.path`` with ``cleaned`` when the digests differ.

    Returns True when the content differs (and, unless ``dry_run``, was
    written). Equal digests are a no-op and the file is never opened for
    writing. A symlinked path is resolved so the link survives and its
    target receives the cleaned bytes.
    """
    if cleaned_digest is None:
        cleaned_digest = content_digest(cleaned)
    if cleaned_digest == original.digest:
        logger.info("No changes for %s; leaving file untouched", original.path)
        return False
    if dry_run:
        logger.info("Dry run: %s would be rewritten (%d -> %d bytes)", original.path, len(original.data), len(cleaned))
        return True
    target = original.path.resolve()
    if atomic:
        _replace_atomically(target, cleaned)
    else:
        _overwrite_in_place(target, cleaned)
    logger.info("Rewrote %s (%d -> %d bytes, sha256=%s)", original.path, len(original.data), len(cleaned), cleaned_digest)
    return True
