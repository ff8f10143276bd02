"""
Watch process launch.

Starts the library's rebuild-on-change script in a separate window. The
launched process is independent: spalink does not wait for it and cannot
stop it.
"""

from pathlib import Path

from spalink.utils.logging import logger
from spalink.utils.subprocess import npm_executable, spawn_detached

WATCH_SCRIPT = "watch"


def start_watch(library_root: Path, package_name: str) -> int:
    """
    Spawn ``npm run watch`` detached from this process.

    Returns:
        Process id of the watch process
    """
    pid = spawn_detached(
        [npm_executable(), "run", WATCH_SCRIPT],
        library_root,
        title=f"{package_name} watch",
    )
    logger.info(f"Started watch process for {package_name} (pid {pid})")
    return pid
