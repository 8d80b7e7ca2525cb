"""Shared test fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_RECORDING_LAUNCHER = """\
import json
import os
import sys
from pathlib import Path

Path("launch_argv.json").write_text(json.dumps(sys.argv[1:]), "utf-8")
sys.exit(int(os.environ.get("FAKE_MO2_EXIT_CODE", "0")))
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer MO2_LAUNCH_* variables out of tests."""
    for name in (
        "MO2_LAUNCH_MO2_PATH",
        "MO2_LAUNCH_XEDIT_PATH",
        "MO2_LAUNCH_GAME_FLAG",
        "MO2_LAUNCH_LOG_LEVEL",
        "MO2_LAUNCH_DRY_RUN",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def recording_launcher(tmp_path: Path, monkeypatch) -> Path:
    """Use the current interpreter as MO2; it runs ``./run`` and records its arguments.

    Returns the path of the JSON file the fake launcher writes.
    """
    (tmp_path / "run").write_text(_RECORDING_LAUNCHER, "utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path / "launch_argv.json"


@pytest.fixture()
def python_launcher() -> str:
    return sys.executable
