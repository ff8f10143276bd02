"""
Fatal error types.

Each error is a click exception so the CLI prints the message and exits
with status 1 without a traceback.
"""

import subprocess
from pathlib import Path

import click


class SpalinkError(click.ClickException):
    """Base class for errors that terminate a run."""


class MissingRequiredPath(SpalinkError):
    """A required path has no value and cannot be prompted for."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f"Missing required path: {field}. "
            "Pass it on the command line or run without --non-interactive."
        )


class PathNotFound(SpalinkError):
    """A required root path does not exist on disk."""

    def __init__(self, field: str, path: str):
        self.field = field
        self.path = path
        super().__init__(f"{field} not found: {path}")


class MissingAdditionalPath(SpalinkError):
    """An additional SPA path does not exist and skipping is not enabled."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Additional SPA path not found: {path} "
            "(use --skip-missing-additional to skip it)"
        )


class ExternalCommandFailed(SpalinkError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, cwd: Path | str | None = None):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.cwd = cwd
        location = f" in {cwd}" if cwd is not None else ""
        super().__init__(
            f"Command failed with exit code {returncode}{location}: "
            f"{subprocess.list2cmdline(self.cmd)}"
        )
