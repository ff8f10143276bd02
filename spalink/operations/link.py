"""
Package link operations.

Registers the built library package with ``npm link`` and links it into
each consumer project.
"""

from pathlib import Path

from spalink.config.paths import PACKAGE_MANIFEST, built_package_candidates
from spalink.utils.logging import logger
from spalink.utils.subprocess import run_npm


def find_built_package(library_root: Path, package_name: str) -> Path:
    """
    Locate the directory holding the built package's package.json.

    Falls back to the library root when no build output is found.
    """
    for candidate in built_package_candidates(library_root, package_name):
        if (candidate / PACKAGE_MANIFEST).is_file():
            return candidate

    logger.warning(f"No built {PACKAGE_MANIFEST} found, linking {library_root}")
    return library_root


def register_package(package_dir: Path) -> None:
    """Make the package available for linking (``npm link``)."""
    run_npm(["link"], package_dir, f"Registering package link from {package_dir}")


def link_into(consumer_root: Path, package_name: str) -> None:
    """Link the package into one consumer project."""
    run_npm(
        ["link", package_name],
        consumer_root,
        f"Linking {package_name} into {consumer_root}",
    )


def link_library(library_root: Path, package_name: str, consumers: list[Path]) -> None:
    """
    Register the built package and link it into every consumer, in order.

    Args:
        library_root: Library project root
        package_name: npm package name to link
        consumers: Consumer project roots
    """
    package_dir = find_built_package(library_root, package_name)
    register_package(package_dir)

    for consumer in consumers:
        link_into(consumer, package_name)

    logger.info(f"Linked {package_name} into {len(consumers)} project(s)")
