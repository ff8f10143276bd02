"""Shared pytest fixtures."""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from spalink.utils.logging import logger


@dataclass
class CommandLog:
    """Commands seen by the faked subprocess module."""

    runs: list[tuple[list[str], Path]] = field(default_factory=list)
    spawns: list[tuple[list[str], Path]] = field(default_factory=list)
    fail_on: tuple[str, ...] | None = None
    fail_code: int = 1
    missing_executable: bool = False

    @property
    def all(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.runs + self.spawns]


class FakeProcess:
    pid = 4242


@pytest.fixture(autouse=True)
def reset_log_level():
    """Undo --debug-paths between tests."""
    yield
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def commands(monkeypatch):
    """Record external commands instead of running them."""
    log = CommandLog()

    def fake_run(cmd, cwd=None, check=False, **kwargs):
        if log.missing_executable:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        log.runs.append((list(cmd), Path(cwd)))
        code = log.fail_code if log.fail_on and tuple(cmd[1:]) == log.fail_on else 0
        return subprocess.CompletedProcess(cmd, code)

    def fake_popen(cmd, cwd=None, **kwargs):
        log.spawns.append((list(cmd), Path(cwd)))
        return FakeProcess()

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    return log


@pytest.fixture
def config_file(tmp_path):
    """Config file location inside a not-yet-created directory."""
    return tmp_path / "settings" / "config.json"


@pytest.fixture
def projects(tmp_path):
    """Existing library and Infinity project directories."""
    library = tmp_path / "ui-components"
    infinity = tmp_path / "infinity"
    library.mkdir()
    infinity.mkdir()
    return library.resolve(), infinity.resolve()
