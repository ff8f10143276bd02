"""
Path resolution.

Merges command-line values, saved defaults and interactive prompts into the
final set of paths, then normalizes them to absolute paths and checks that
they exist.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import click

from spalink.config.paths import DEFAULT_PACKAGE_NAME
from spalink.config.store import PersistedConfig
from spalink.core.errors import MissingAdditionalPath, MissingRequiredPath, PathNotFound
from spalink.core.sanitize import sanitize
from spalink.utils.logging import logger

Prompt = Callable[..., str]

ADDITIONAL_PATH_DELIMITERS = re.compile(r"[,;]")
MAX_PROMPT_ATTEMPTS = 5

LIBRARY_PATH_LABEL = "Library path"
INFINITY_PATH_LABEL = "Infinity path"
ADDITIONAL_PATHS_LABEL = "Additional SPA paths"


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute paths for one run."""

    library_path: str
    infinity_path: str
    additional_spa_paths: tuple[str, ...]
    package_name: str
    skipped: tuple[str, ...] = ()

    @property
    def consumer_paths(self) -> list[str]:
        """Projects the package is linked into, Infinity first."""
        return [self.infinity_path, *self.additional_spa_paths]


def resolve_value(
    label: str,
    explicit: str | None,
    persisted: str | None,
    *,
    required: bool,
    interactive: bool,
    prompt: Prompt = click.prompt,
) -> str | None:
    """
    Pick the value for one field.

    An explicit value wins. Otherwise the saved value is offered as the
    prompt default, or used as-is when not interactive.

    Raises:
        MissingRequiredPath: If a required field ends up without a value
    """
    value = sanitize(explicit)
    if value is not None:
        logger.debug(f"{label}: using command-line value {value!r}")
        return value

    default = sanitize(persisted)

    if not interactive:
        if default is None and required:
            raise MissingRequiredPath(label)
        logger.debug(f"{label}: using saved value {default!r}")
        return default

    if not required:
        answer = prompt(
            f"{label} (comma or semicolon separated, blank for none)",
            default=default or "",
            show_default=default is not None,
        )
        return sanitize(answer)

    for _ in range(MAX_PROMPT_ATTEMPTS):
        answer = sanitize(prompt(label, default=default))
        if answer is not None:
            return answer
        click.echo(f"{label} is required.")

    raise MissingRequiredPath(label)


def resolve_inputs(
    explicit: PersistedConfig,
    stored: PersistedConfig,
    *,
    interactive: bool,
    prompt: Prompt = click.prompt,
) -> PersistedConfig:
    """
    Resolve every field from command-line values and saved defaults.

    Returns:
        A new record holding the sanitized values for this run
    """
    library_path = resolve_value(
        LIBRARY_PATH_LABEL,
        explicit.library_path,
        stored.library_path,
        required=True,
        interactive=interactive,
        prompt=prompt,
    )
    infinity_path = resolve_value(
        INFINITY_PATH_LABEL,
        explicit.infinity_path,
        stored.infinity_path,
        required=True,
        interactive=interactive,
        prompt=prompt,
    )
    additional = resolve_value(
        ADDITIONAL_PATHS_LABEL,
        explicit.additional_spa_paths,
        stored.additional_spa_paths,
        required=False,
        interactive=interactive,
        prompt=prompt,
    )
    package_name = (
        sanitize(explicit.package_name)
        or sanitize(stored.package_name)
        or DEFAULT_PACKAGE_NAME
    )

    return PersistedConfig(
        library_path=library_path,
        infinity_path=infinity_path,
        additional_spa_paths=additional,
        package_name=package_name,
    )


def parse_additional_paths(raw: str | None) -> list[str]:
    """
    Split delimited path text into individual paths.

    Order is kept, empty entries are dropped and duplicates are kept.

    Examples:
        "a;b,c" -> ["a", "b", "c"]
        "a;a"   -> ["a", "a"]
    """
    if raw is None:
        return []
    tokens = (sanitize(token) for token in ADDITIONAL_PATH_DELIMITERS.split(raw))
    return [token for token in tokens if token is not None]


def normalize_path(value: str) -> str:
    """
    Make a path absolute relative to the working directory.

    Paths that cannot be resolved (usually because they do not exist yet)
    are returned as given; existence is checked separately.
    """
    try:
        return str(Path(value).expanduser().resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug(f"Could not resolve {value!r}, keeping it as given: {e}")
        return value


def _require_directory(label: str, value: str | None) -> str:
    if value is None:
        raise MissingRequiredPath(label)
    normalized = normalize_path(value)
    logger.debug(f"{label}: {value!r} -> {normalized!r}")
    if not Path(normalized).is_dir():
        raise PathNotFound(label, normalized)
    return normalized


def normalize_inputs(
    inputs: PersistedConfig,
    *,
    skip_missing_additional: bool = False,
) -> ResolvedPaths:
    """
    Turn resolved inputs into absolute, existing paths.

    Raises:
        PathNotFound: If the library or Infinity path does not exist
        MissingAdditionalPath: If an additional path does not exist and
            skip_missing_additional is not set
    """
    library_path = _require_directory(LIBRARY_PATH_LABEL, inputs.library_path)
    infinity_path = _require_directory(INFINITY_PATH_LABEL, inputs.infinity_path)

    additional: list[str] = []
    skipped: list[str] = []
    for token in parse_additional_paths(inputs.additional_spa_paths):
        normalized = normalize_path(token)
        logger.debug(f"{ADDITIONAL_PATHS_LABEL}: {token!r} -> {normalized!r}")
        if Path(normalized).is_dir():
            additional.append(normalized)
        elif skip_missing_additional:
            logger.warning(f"Additional SPA path not found (skipped): {normalized}")
            skipped.append(normalized)
        else:
            raise MissingAdditionalPath(normalized)

    return ResolvedPaths(
        library_path=library_path,
        infinity_path=infinity_path,
        additional_spa_paths=tuple(additional),
        package_name=inputs.package_name or DEFAULT_PACKAGE_NAME,
        skipped=tuple(skipped),
    )
