"""CLI app definition: the single `handbook` combine command."""

import os
from typing import Annotated

import typer

from handbook_combiner.catalog import Resolution, list_modules
from handbook_combiner.combiner import combine
from handbook_combiner.config import DEFAULT_OUTPUT, NAMESPACE_TITLES, ROOT_ENV_VAR
from handbook_combiner.utils import console, log, printable, resolve_path
from handbook_combiner.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


def print_catalog(root: str) -> None:
    """Print every resolvable module, grouped by namespace."""
    console.print("Available modules:")
    for namespace, names in list_modules(root).items():
        console.print()
        console.print(f"{NAMESPACE_TITLES[namespace]}:", style="bold")
        if not names:
            console.print("  (none)", style="dim")
        for name in names:
            console.print(f"  {printable(name)}", markup=False, highlight=False)


def _status_reporter(log_file: str | None):
    """Return an on_resolve callback that prints found/not-found per module."""

    def _report(resolution: Resolution) -> None:
        if resolution.found:
            log(f"✓ Adding: {resolution.reference}", style="green", log_file=log_file)
            return
        log(f"✗ Not found: {resolution.reference}", style="red", log_file=log_file)
        log("  Use 'handbook --list' to see available modules", style="yellow", log_file=log_file)

    return _report


def _usage_error(ctx: typer.Context, message: str) -> None:
    console.print(printable(f"Error: {message}"), style="bold red", markup=False, soft_wrap=True)
    typer.echo(ctx.get_usage())
    typer.echo(f"Try '{ctx.command_path} -h' for help.")
    raise typer.Exit(1)


app = typer.Typer(
    help="Combine handbook modules into a single CLAUDE.md instruction file.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


@app.command()
def main(
    ctx: typer.Context,
    modules: Annotated[
        list[str] | None,
        typer.Argument(help="Module references, e.g. languages/typescript or typescript", show_default=False),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help=f"Output file path (default: {DEFAULT_OUTPUT} under the handbook root)"),
    ] = None,
    no_base: Annotated[
        bool, typer.Option("--no-base", "-n", help="Exclude the base document")
    ] = False,
    list_only: Annotated[
        bool, typer.Option("--list", "-l", help="List available modules and exit")
    ] = False,
    root: Annotated[
        str | None,
        typer.Option("--root", "-r", envvar=ROOT_ENV_VAR, help="Handbook root directory (default: current directory)"),
    ] = None,
    log_file: Annotated[
        str | None, typer.Option(help="Also append status lines to this file")
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Combine handbook modules, in the order given, into one instruction file."""
    handbook_root = resolve_path(root or os.getcwd())
    if not os.path.isdir(handbook_root):
        _usage_error(ctx, f"Handbook root not found: {handbook_root}")

    if list_only:
        print_catalog(handbook_root)
        raise typer.Exit()

    if not modules:
        _usage_error(ctx, "No modules specified")

    output_path = resolve_path(output) if output else resolve_path(DEFAULT_OUTPUT, base=handbook_root)
    log_path = resolve_path(log_file) if log_file else None

    try:
        result = combine(
            handbook_root,
            modules,
            output_path,
            include_base=not no_base,
            on_resolve=_status_reporter(log_path),
        )
    except OSError as exc:
        log(f"Error: {exc}", style="bold red", log_file=log_path)
        raise typer.Exit(1)

    log("", log_file=log_path)
    log(f"Generated: {output_path}", style="green", log_file=log_path)
    log(f"Lines: {result.line_count}", log_file=log_path)
