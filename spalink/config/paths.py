"""
Filesystem locations and shared constants.

Centralizes path definitions to avoid magic strings in individual modules.
"""

from pathlib import Path

import click

APP_NAME = "spalink"
CONFIG_DIR = Path(click.get_app_dir(APP_NAME))
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_FILE_ENVVAR = "SPALINK_CONFIG_FILE"

# Package linked into the consumer SPAs unless overridden
DEFAULT_PACKAGE_NAME = "@infinity/ui-components"

# Library layout
NODE_MODULES_DIR = "node_modules"
BUILD_OUTPUT_DIR = "dist"
PACKAGE_MANIFEST = "package.json"


def built_package_candidates(library_root: Path, package_name: str) -> list[Path]:
    """
    Directories that may hold the built package, most specific first.

    Scoped names (``@scope/name``) are built into ``dist/name``.
    """
    unscoped = package_name.rsplit("/", 1)[-1]
    return [
        library_root / BUILD_OUTPUT_DIR / unscoped,
        library_root / BUILD_OUTPUT_DIR,
        library_root,
    ]
