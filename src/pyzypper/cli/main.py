"""Command-Line Interface for pyzypper.

Provides commands to search for and install openSUSE packages through
zypper.
"""

import asyncio
import logging

import typer
from rich.console import Console

from pyzypper.cli.display import display_search_results
from pyzypper.client import Client
from pyzypper.config import Config
from pyzypper.errors import (
    CommandCancelledError,
    NoMatchingItemError,
    RootPrivilegesError,
    ZypperError,
    ZypperNotFoundError,
)
from pyzypper.util import setup_logging

app = typer.Typer(
    name="pyzypper",
    help="Search for and install openSUSE packages through zypper.",
    add_completion=False,
    no_args_is_help=True,
)


def _get_console(use_stderr: bool = False) -> Console:
    """Create a Rich console writing to stdout or stderr."""
    return Console(stderr=use_stderr)


def _make_client(path: str | None, verbose: bool) -> Client:
    """Create a client, exiting with a message if zypper is unusable."""
    logger = setup_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        return Client(logger=logger, path=path)
    except ZypperNotFoundError as e:
        _get_console(use_stderr=True).print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)


def _fail(error: ZypperError) -> typer.Exit:
    """Print an error and return the Exit matching its kind."""
    error_console = _get_console(use_stderr=True)

    if isinstance(error, NoMatchingItemError):
        error_console.print(f"[yellow]No package matches '{error.name}'.[/yellow]")
        return typer.Exit(code=Config.EXIT_NO_MATCHING_ITEM)
    if isinstance(error, RootPrivilegesError):
        error_console.print(
            "[bold red]Root privileges are required. "
            "Run the command again as root.[/bold red]"
        )
        return typer.Exit(code=Config.EXIT_ROOT_PRIVILEGES)
    if isinstance(error, CommandCancelledError):
        error_console.print(f"[bold red]Timed out: {error}[/bold red]")
        return typer.Exit(code=1)

    error_console.print(f"[bold red]Error: {error}[/bold red]")
    return typer.Exit(code=1)


async def _search_async(
    name: str, path: str | None, timeout: float | None, verbose: bool = False
) -> None:
    """Run a search and display its results."""
    client = _make_client(path, verbose)
    try:
        packages = await client.package.search(name, timeout=timeout)
    except ZypperError as e:
        raise _fail(e) from e

    display_search_results(name, packages)


async def _install_async(
    name: str,
    extra_args: list[str],
    path: str | None,
    timeout: float | None,
    verbose: bool = False,
) -> None:
    """Install a package and report the outcome."""
    client = _make_client(path, verbose)
    try:
        await client.package.install(name, *extra_args, timeout=timeout)
    except ZypperError as e:
        raise _fail(e) from e

    _get_console().print(f"[green]Installed {name}[/green]")


@app.command("search")
def search_command(
    name: str = typer.Argument(..., help="Name of the package to search for."),
    path: str | None = typer.Option(
        None, "--path", "-p", help="Path to the zypper binary. Defaults to PATH."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", "-t", help="Give up after this many seconds."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log zypper calls."),
):
    """Search for packages in all configured repositories."""
    asyncio.run(_search_async(name, path, timeout, verbose))


@app.command(
    "install",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def install_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the package to install."),
    path: str | None = typer.Option(
        None, "--path", "-p", help="Path to the zypper binary. Defaults to PATH."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", "-t", help="Give up after this many seconds."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log zypper calls."),
):
    """Install a package. Extra arguments are passed on to zypper install."""
    asyncio.run(_install_async(name, list(ctx.args), path, timeout, verbose))


if __name__ == "__main__":
    app()
