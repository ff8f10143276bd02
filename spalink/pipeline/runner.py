"""
Run orchestration.

Resolves paths, applies the save policy, then runs the build, link and
watch steps in order. Steps never overlap, and the first failure stops the
run. Steps that already ran are not undone.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import click

from spalink.config.store import ConfigStore, PersistedConfig
from spalink.core.errors import SpalinkError
from spalink.core.resolver import ResolvedPaths, normalize_inputs, resolve_inputs
from spalink.core.save_policy import ask_yes_no, detect_changes, should_save
from spalink.operations.build import build_library
from spalink.operations.link import link_library
from spalink.operations.watch import start_watch
from spalink.utils.logging import logger


@dataclass(frozen=True)
class RunOptions:
    """Command-line choices for one run."""

    library_path: str | None = None
    infinity_path: str | None = None
    additional_spa_paths: str | None = None
    package_name: str | None = None
    skip_missing_additional: bool = False
    interactive: bool = True
    force_save: bool = False
    no_save: bool = False
    skip_build: bool = False
    skip_link: bool = False
    skip_watch: bool = False

    @property
    def explicit(self) -> PersistedConfig:
        return PersistedConfig(
            library_path=self.library_path,
            infinity_path=self.infinity_path,
            additional_spa_paths=self.additional_spa_paths,
            package_name=self.package_name,
        )


@dataclass
class RunResult:
    paths: ResolvedPaths
    saved: bool
    background: list[tuple[str, int]] = field(default_factory=list)


def prepare_paths(
    options: RunOptions,
    store: ConfigStore,
    *,
    prompt: Callable[..., str] = click.prompt,
    confirm: Callable[[str], bool] = ask_yes_no,
) -> tuple[ResolvedPaths, bool]:
    """
    Load defaults, resolve inputs, save if the policy says so, normalize.

    Returns:
        The resolved paths and whether the defaults were saved
    """
    config_existed = store.exists()
    stored = store.load()

    inputs = resolve_inputs(
        options.explicit, stored, interactive=options.interactive, prompt=prompt
    )

    changes = detect_changes(stored, inputs) if config_existed else []
    if changes:
        logger.info(f"Changed since last save: {', '.join(changes)}")

    saved = should_save(
        config_existed=config_existed,
        changed=bool(changes),
        force_save=options.force_save,
        no_save=options.no_save,
        interactive=options.interactive,
        confirm=confirm,
    )
    if saved:
        store.save(inputs)

    paths = normalize_inputs(
        inputs, skip_missing_additional=options.skip_missing_additional
    )
    logger.info(f"Library:  {paths.library_path}")
    logger.info(f"Infinity: {paths.infinity_path}")
    for extra in paths.additional_spa_paths:
        logger.info(f"SPA:      {extra}")
    logger.info(f"Package:  {paths.package_name}")
    return paths, saved


def run_all(
    options: RunOptions,
    store: ConfigStore,
    *,
    prompt: Callable[..., str] = click.prompt,
    confirm: Callable[[str], bool] = ask_yes_no,
) -> RunResult:
    """
    Run a complete link session.

    Steps:
      1. build - npm install (if needed) and npm run build in the library
      2. link  - npm link the built package, then link it into each SPA
      3. watch - start npm run watch in a separate window

    Raises:
        SpalinkError: On the first path or command failure
    """
    paths, saved = prepare_paths(options, store, prompt=prompt, confirm=confirm)
    result = RunResult(paths=paths, saved=saved)

    library = Path(paths.library_path)
    consumers = [Path(p) for p in paths.consumer_paths]

    def watch() -> None:
        pid = start_watch(library, paths.package_name)
        result.background.append(("watch", pid))

    steps: list[tuple[str, Callable[[], None]]] = []
    if not options.skip_build:
        steps.append(("build", lambda: build_library(library)))
    if not options.skip_link:
        steps.append(
            ("link", lambda: link_library(library, paths.package_name, consumers))
        )
    if not options.skip_watch:
        steps.append(("watch", watch))

    if not steps:
        logger.info("All steps skipped")
        return result

    for i, (name, func) in enumerate(steps, 1):
        logger.info(f"[{i}/{len(steps)}] Running {name}")
        try:
            func()
        except SpalinkError:
            logger.error(f"{name} failed")
            raise
        logger.info(f"{name} completed")

    logger.info("All steps completed successfully")
    return result
