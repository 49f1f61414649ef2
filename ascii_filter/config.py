import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


def _coerce_bool(value, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    # write-then-rename; false falls back to truncate-then-write
    atomic_write: bool = True


def load_settings() -> Settings:
    """Read settings from the environment (and a ``.env`` file, if present)."""
    log_file = os.getenv("ASCII_FILTER_LOG_FILE", "").strip() or None
    return Settings(
        log_level=os.getenv("ASCII_FILTER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        log_file=log_file,
        atomic_write=_coerce_bool(os.getenv("ASCII_FILTER_ATOMIC_WRITE"), default=True),
    )
