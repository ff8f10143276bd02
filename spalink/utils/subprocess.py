"""
Subprocess execution utilities with consistent error handling.
"""

import os
import subprocess
from pathlib import Path

from spalink.core.errors import ExternalCommandFailed
from spalink.utils.logging import logger

# Exit status reported when the executable itself cannot be started
COMMAND_NOT_FOUND = 127


def npm_executable() -> str:
    """Name of the npm launcher for this platform."""
    return "npm.cmd" if os.name == "nt" else "npm"


def run_npm(
    args: list[str],
    cwd: Path | str,
    description: str | None = None,
) -> subprocess.CompletedProcess:
    """
    Run an npm subcommand in a project directory.

    Args:
        args: Arguments after ``npm``
        cwd: Project directory
        description: Optional description for logging

    Returns:
        CompletedProcess result
    """
    return run_command([npm_executable(), *args], cwd, description)


def run_command(
    cmd: list[str],
    cwd: Path | str,
    description: str | None = None,
) -> subprocess.CompletedProcess:
    """
    Run a command and wait for it, streaming its output to the terminal.

    Args:
        cmd: Command and arguments to run
        cwd: Working directory
        description: Optional description for logging

    Returns:
        CompletedProcess result

    Raises:
        ExternalCommandFailed: If the command exits non-zero or cannot be started
    """
    if description:
        logger.info(description)
    logger.debug(f"Running {subprocess.list2cmdline(cmd)} in {cwd}")

    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except FileNotFoundError as e:
        logger.error(f"Command not found: {cmd[0]} ({e})")
        raise ExternalCommandFailed(cmd, COMMAND_NOT_FOUND, cwd) from e

    if result.returncode != 0:
        logger.error(f"Command failed: {subprocess.list2cmdline(cmd)}")
        raise ExternalCommandFailed(cmd, result.returncode, cwd)
    return result


def spawn_detached(
    cmd: list[str],
    cwd: Path | str,
    title: str | None = None,
) -> int:
    """
    Start a long-running command in its own window or session.

    The child is not waited on and no handle is kept: this process has no
    lifecycle authority over it, and it keeps running after we exit until
    its window is closed.

    Args:
        cmd: Command and arguments to run
        cwd: Working directory
        title: Console window title (Windows only)

    Returns:
        Process id of the started command

    Raises:
        ExternalCommandFailed: If the command cannot be started
    """
    kwargs: dict = {"cwd": cwd}
    if os.name == "nt":
        kwargs["creationflags"] = subprocess.CREATE_NEW_CONSOLE
        if title:
            cmd = ["cmd.exe", "/k", "title", title, "&&", *cmd]
    else:
        kwargs["start_new_session"] = True
        kwargs["stdin"] = subprocess.DEVNULL

    logger.debug(f"Spawning {subprocess.list2cmdline(cmd)} in {cwd}")
    try:
        process = subprocess.Popen(cmd, **kwargs)
    except FileNotFoundError as e:
        logger.error(f"Command not found: {cmd[0]} ({e})")
        raise ExternalCommandFailed(cmd, COMMAND_NOT_FOUND, cwd) from e
    return process.pid
