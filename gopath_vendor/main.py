"""gopath-vendor CLI - inspect GOPATH resolution and remove vendored packages."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from . import __version__
from .console import console
from .console import err_console
from .context import Context
from .context import MissingManifestError
from .context import NotInWorkspaceError
from .context import PruneStatus
from .context import VENDOR_FILENAME
from .context import VendorFileError
from .context import find_root
from .context import remove_package
from .logging_setup import init_json_logging
from .settings import AppSettings
from .settings import load_context
from .utils.error_format import escape_markup
from .utils.error_format import error_hint
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)

_HANDLED_ERRORS = (NotInWorkspaceError, VendorFileError, OSError)


def _workspace(ctx: click.Context) -> Context:
    """Build the Context once per invocation."""
    obj = ctx.ensure_object(dict)
    if "workspace" not in obj:
        obj["workspace"] = load_context(obj.get("gopath"), obj.get("goroot"), obj.get("settings"))
    return obj["workspace"]


def _fail(e: BaseException) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}", soft_wrap=True)
    if hint := error_hint(e):
        err_console.print(f"[dim]{escape_markup(hint)}[/dim]", soft_wrap=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(__version__)
@click.option("--gopath", "gopath", multiple=True, help="GOPATH entry (repeatable); overrides $GOPATH")
@click.option("--goroot", default=None, help="GOROOT; overrides $GOROOT")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Append JSONL logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for the JSONL sink",
)
@click.pass_context
def cli(ctx: click.Context, gopath: tuple[str, ...], goroot: str | None, log_file: str | None, log_level: str | None):
    """gopath-vendor - GOPATH import resolution and vendor tree maintenance."""
    settings = AppSettings()
    log_settings = settings.get_logging()
    init_json_logging(log_file or log_settings.get("path"), log_level or log_settings.get("level"))

    ctx.ensure_object(dict)
    ctx.obj.update({"gopath": list(gopath), "goroot": goroot, "settings": settings})

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


@cli.command()
@click.argument("import_path")
@click.option(
    "--from",
    "relative",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of the importing package; enables vendor lookup",
)
@click.pass_context
def resolve(ctx: click.Context, import_path: str, relative: str | None):
    """Show the directory an import path resolves to."""
    try:
        directory, gopath = _workspace(ctx).find_import_dir(relative, import_path)
    except _HANDLED_ERRORS as e:
        _fail(e)

    console.print(escape_markup(directory), soft_wrap=True)
    console.print(f"[dim]workspace: {escape_markup(gopath)}[/dim]", soft_wrap=True)


@cli.command(name="import-path")
@click.argument("directory", type=click.Path(file_okay=False))
@click.pass_context
def import_path_cmd(ctx: click.Context, directory: str):
    """Show the import path of a directory inside a workspace."""
    try:
        import_path, gopath = _workspace(ctx).find_import_path(Path(directory).absolute())
    except _HANDLED_ERRORS as e:
        _fail(e)
    console.print(f"[cyan]{escape_markup(import_path)}[/cyan] [dim]({escape_markup(gopath)})[/dim]", soft_wrap=True)


@cli.command()
@click.argument("import_path")
@click.pass_context
def canonical(ctx: click.Context, import_path: str):
    """Show the upstream import path of a (possibly vendored) package."""
    try:
        canonical_path = _workspace(ctx).find_canonical_path(import_path)
    except _HANDLED_ERRORS as e:
        _fail(e)
    console.print(escape_markup(canonical_path), soft_wrap=True)


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False), default=".")
@click.option("--marker", default=VENDOR_FILENAME, show_default=True, help="File marking the vendoring root")
def root(directory: str, marker: str):
    """Find the nearest folder at or above DIRECTORY holding the marker file."""
    try:
        found = find_root(directory, marker)
    except MissingManifestError:
        err_console.print(
            f"[yellow]No {escape_markup(marker)} found above {escape_markup(directory)}[/yellow]",
            soft_wrap=True,
        )
        sys.exit(1)
    except OSError as e:
        _fail(e)
    console.print(escape_markup(found), soft_wrap=True)


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt")
def remove(path: str, force: bool):
    """Remove a vendored package folder and prune empty parents.

    Files directly inside PATH are deleted; nested package folders are kept.
    """
    if not force and not click.confirm(f"Remove files in {path}?"):
        console.print("[yellow]Aborted.[/yellow]")
        return

    try:
        outcome = remove_package(path)
    except OSError as e:
        _fail(e)

    if outcome.removed:
        console.print(f"[green]Removed {escape_markup(path)}[/green] [dim]({outcome.removed} folders pruned)[/dim]")
    else:
        console.print(f"[green]Removed files in {escape_markup(path)}[/green]")
    if outcome.status is PruneStatus.STOPPED_ERROR:
        logger.info(f"Pruning stopped at {outcome.stopped_at}: {outcome.error}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
