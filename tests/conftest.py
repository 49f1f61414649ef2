from pathlib import Path

import pytest

_ENV_KEYS = ("ASCII_FILTER_LOG_LEVEL", "ASCII_FILTER_LOG_FILE", "ASCII_FILTER_ATOMIC_WRITE")


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def clean_filter_env(monkeypatch: pytest.MonkeyPatch):
    # A developer's .env must not leak into test runs
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def make_file(tmp_path: Path):
    def _make(data: bytes, name: str = "sample.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make
