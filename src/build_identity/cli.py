"""CLI app definition and commands."""

import logging
from typing import Annotated

import typer
from rich.table import Table

from build_identity.flavor import (
    is_mac_sys_ext,
    is_mobile_build,
    is_sandboxed_macos,
    is_windows_gui,
    os_display_name,
)
from build_identity.meta import get_meta
from build_identity.release import is_unstable_build
from build_identity.utils import console
from build_identity.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


app = typer.Typer(
    help="Report the identity of the running build: OS, packaging flavor, version metadata.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log how each flag was detected."),
    ] = False,
) -> None:
    """Build identity inspector."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


# ============================================
# Commands
# ============================================


@app.command()
def show() -> None:
    """Show the OS, build flavor and version of this build."""
    meta = get_meta()

    table = Table(title="Build identity", show_header=False)
    table.add_column("Property", style="bold cyan")
    table.add_column("Value")
    table.add_row("OS", os_display_name())
    table.add_row("Mobile build", _yes_no(is_mobile_build()))
    table.add_row("Sandboxed macOS", _yes_no(is_sandboxed_macos()))
    table.add_row("macOS system extension", _yes_no(is_mac_sys_ext()))
    table.add_row("Windows GUI", _yes_no(is_windows_gui()))
    table.add_row("Version", meta.short)
    table.add_row("Long version", meta.long)
    table.add_row("Development build", _yes_no(meta.is_dev))
    table.add_row("Unstable branch", _yes_no(is_unstable_build()))
    table.add_row("Git commit", meta.git_commit or "unknown")
    if meta.extra_git_commit:
        table.add_row("Extra git commit", meta.extra_git_commit)
    table.add_row("Dirty tree", _yes_no(meta.git_dirty))
    table.add_row("Capability version", str(meta.cap))
    console.print(table)


@app.command("meta")
def meta_command(
    indent: Annotated[int | None, typer.Option(help="Pretty-print with this many spaces.")] = None,
) -> None:
    """Print version metadata as JSON."""
    typer.echo(get_meta().to_json(indent=indent))
