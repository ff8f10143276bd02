"""
Change detection and the save policy.

Compares freshly resolved inputs with the saved defaults and decides
whether the defaults get rewritten.
"""

import re
from collections.abc import Callable

import click

from spalink.config.store import PersistedConfig
from spalink.core.sanitize import sanitize

AFFIRMATIVE_PATTERN = re.compile(r"^\s*(y|yes)\s*$", re.IGNORECASE)

# Fields compared between runs, with display labels
COMPARED_FIELDS = {
    "library_path": "library path",
    "infinity_path": "Infinity path",
    "additional_spa_paths": "additional SPA paths",
    "package_name": "package name",
}


def ask_yes_no(question: str, prompt: Callable[..., str] = click.prompt) -> bool:
    """Ask a free-text question and report whether the answer is affirmative."""
    answer = prompt(f"{question} [y/N]", default="", show_default=False)
    return bool(AFFIRMATIVE_PATTERN.match(answer or ""))


def detect_changes(previous: PersistedConfig, current: PersistedConfig) -> list[str]:
    """
    List the labels of compared fields that differ.

    Both sides are sanitized first, so trailing separators, quotes and
    None versus empty text do not count as changes.
    """
    return [
        label
        for name, label in COMPARED_FIELDS.items()
        if sanitize(getattr(previous, name)) != sanitize(getattr(current, name))
    ]


def should_save(
    *,
    config_existed: bool,
    changed: bool,
    force_save: bool = False,
    no_save: bool = False,
    interactive: bool = True,
    confirm: Callable[[str], bool] = ask_yes_no,
) -> bool:
    """
    Decide whether to write the resolved inputs back as defaults.

    In priority order: no_save never saves, force_save always saves, a
    first run or a changed field saves only after interactive confirmation,
    and an unchanged config is left alone without prompting.
    """
    if no_save:
        return False
    if force_save:
        return True
    if not config_existed:
        return interactive and confirm("Save these paths as defaults?")
    if changed:
        return interactive and confirm("Paths changed. Update saved defaults?")
    return False
