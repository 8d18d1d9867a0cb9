# src/pyzypper/cli/display.py

"""Display and formatting utilities for CLI output."""

from enum import Enum

from rich.console import Console
from rich.table import Table

from pyzypper.models import Package, PackageStatus

console = Console()

_STATUS_STYLES = {
    PackageStatus.INSTALLED: "green",
    PackageStatus.NOT_INSTALLED: "dim",
}


def _text(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


def build_search_table(name: str, packages: list[Package]) -> Table:
    """Builds a table with one row per package.

    Args:
        name: The name that was searched for, used as the table title.
        packages: Packages to list.

    Returns:
        A Rich table ready to print.
    """
    table = Table(title=f"Search results for '{name}'", title_justify="left")
    table.add_column("Status")
    table.add_column("Name", style="bold cyan")
    table.add_column("Kind")
    table.add_column("Version")
    table.add_column("Arch")
    table.add_column("Repository", style="magenta")

    for package in packages:
        status_style = _STATUS_STYLES.get(package.status, "yellow")
        table.add_row(
            f"[{status_style}]{_text(package.status)}[/{status_style}]",
            package.name,
            _text(package.kind),
            package.version,
            package.arch,
            package.repository.name or "",
        )
    return table


def display_search_results(name: str, packages: list[Package]) -> None:
    """Displays search results as a table.

    Args:
        name: The name that was searched for.
        packages: Packages returned by the search.
    """
    if not packages:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(build_search_table(name, packages))
    console.print(f"{len(packages)} result(s).")
