"""Unit test fixtures — auto-clear caches between tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gideon_tasks.config import clear_settings_cache
from gideon_tasks.schemas import TaskSnapshot

VALID_CONFIG = """\
service:
  name: "gideon-web"
  version: "0.1.0"
logging:
  level: "INFO"
  directory: null
"""


@pytest.fixture(autouse=True)
def _clear_caches():
    """Clear settings cache between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture()
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a valid config file and point CONFIG_PATH at it."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(VALID_CONFIG)
    monkeypatch.setenv("CONFIG_PATH", str(config_path))
    return config_path


@pytest.fixture()
def make_task():
    """Build a TaskSnapshot owned by u-requester and assigned to u-doer."""

    def _make(status: str, **overrides: object) -> TaskSnapshot:
        data: dict[str, object] = {
            "id": "task-1",
            "requester_id": "u-requester",
            "assigned_doer_id": "u-doer",
            "status": status,
            "price_cents": 2500,
        }
        data.update(overrides)
        return TaskSnapshot(**data)

    return _make
