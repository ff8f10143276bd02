"""
Main CLI entry point for spalink.
"""

import logging
from pathlib import Path

import click

from spalink import __version__
from spalink.config.paths import CONFIG_FILE, CONFIG_FILE_ENVVAR

config_file_option = click.option(
    "--config-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_FILE_ENVVAR,
    default=CONFIG_FILE,
    show_default=True,
    help="Where saved defaults are kept.",
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Build a local library and link it into Infinity and other SPAs."""
    pass


@cli.command()
@click.option("--library-path", type=str, default=None, help="Library project root.")
@click.option("--infinity-path", type=str, default=None, help="Infinity SPA root.")
@click.option(
    "--additional-spa-paths",
    type=str,
    default=None,
    help="More SPA roots, separated by commas or semicolons.",
)
@click.option(
    "--package-name",
    type=str,
    default=None,
    help="Package to link. Defaults to the saved name or @infinity/ui-components.",
)
@click.option(
    "--skip-missing-additional",
    is_flag=True,
    help="Skip additional SPA paths that do not exist instead of failing.",
)
@click.option("--non-interactive", is_flag=True, help="Never prompt.")
@click.option(
    "--save-config", "force_save", is_flag=True, help="Save paths without asking."
)
@click.option("--no-save-config", "no_save", is_flag=True, help="Never save paths.")
@click.option("--skip-build", is_flag=True, help="Do not build the library.")
@click.option("--skip-link", is_flag=True, help="Do not run npm link.")
@click.option("--skip-watch", is_flag=True, help="Do not start the watch process.")
@click.option("--debug-paths", is_flag=True, help="Log every step of path resolution.")
@config_file_option
def link(
    library_path,
    infinity_path,
    additional_spa_paths,
    package_name,
    skip_missing_additional,
    non_interactive,
    force_save,
    no_save,
    skip_build,
    skip_link,
    skip_watch,
    debug_paths,
    config_file,
):
    """Build the library, link it into the SPAs and start watching."""
    from spalink.config.store import ConfigStore
    from spalink.pipeline.runner import RunOptions, run_all
    from spalink.utils.logging import logger

    if debug_paths:
        logger.setLevel(logging.DEBUG)

    options = RunOptions(
        library_path=library_path,
        infinity_path=infinity_path,
        additional_spa_paths=additional_spa_paths,
        package_name=package_name,
        skip_missing_additional=skip_missing_additional,
        interactive=not non_interactive,
        force_save=force_save,
        no_save=no_save,
        skip_build=skip_build,
        skip_link=skip_link,
        skip_watch=skip_watch,
    )
    store = ConfigStore(config_file, save_disabled=no_save)

    result = run_all(options, store)

    for skipped in result.paths.skipped:
        click.echo(f"Skipped missing SPA path: {skipped}")
    if result.background:
        click.echo("Background processes started:")
        for name, pid in result.background:
            click.echo(f"  {name} (pid {pid}), close its window to stop it")
    click.echo("Done.")


@cli.group()
def config():
    """Saved default commands."""
    pass


@config.command()
@config_file_option
def show(config_file):
    """Print the saved defaults."""
    from spalink.config.store import ConfigStore

    store = ConfigStore(config_file)
    click.echo(f"Config file: {store.path}")
    saved = store.load()
    if saved.is_empty:
        click.echo("No saved defaults.")
        return

    for key, value in saved.to_json().items():
        click.echo(f"  {key}: {value if value is not None else '-'}")


@config.command()
@config_file_option
def clear(config_file):
    """Delete the saved defaults."""
    from spalink.config.store import ConfigStore

    if ConfigStore(config_file).clear():
        click.echo("Saved defaults removed.")
    else:
        click.echo("No saved defaults to remove.")


if __name__ == "__main__":
    cli()
