# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("STORE_PATH", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"TASK_TRACKER_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.store_path == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_TRACKER_STORE_PATH", str(tmp_path / "mine.json"))
    clean_env.setenv("TASK_TRACKER_LOG_LEVEL", " debug ")
    clean_env.setenv("TASK_TRACKER_LOG_FILE", str(tmp_path / "log.txt"))

    s = Settings.from_env()

    assert s.store_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "log.txt"


def test_blank_store_path_falls_back(clean_env) -> None:
    clean_env.setenv("TASK_TRACKER_STORE_PATH", "   ")
    assert Settings.from_env().store_path == Path("tasks.json")
