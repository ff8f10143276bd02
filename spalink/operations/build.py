"""
Library build operations.

Installs dependencies when the library has none yet, then runs its build.
"""

from pathlib import Path

from spalink.config.paths import NODE_MODULES_DIR
from spalink.utils.logging import logger
from spalink.utils.subprocess import run_npm


def install_dependencies(library_root: Path) -> bool:
    """
    Run ``npm install`` if the library has no node_modules yet.

    Returns:
        True if install ran, False if it was skipped
    """
    if (library_root / NODE_MODULES_DIR).is_dir():
        logger.info(f"{NODE_MODULES_DIR}/ present in {library_root} (install skipped)")
        return False

    run_npm(["install"], library_root, f"Installing dependencies in {library_root}")
    return True


def build_library(library_root: Path) -> None:
    """Install if needed and run ``npm run build`` in the library."""
    install_dependencies(library_root)
    run_npm(["run", "build"], library_root, f"Building library in {library_root}")
    logger.info("Library build complete")
