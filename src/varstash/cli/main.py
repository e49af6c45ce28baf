"""CLI for varstash: inspect a store without loading its values."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from varstash.config import StashSettings
from varstash.exceptions import VarStashError
from varstash.logging_config import setup_logging
from varstash.sanitize import sanitize_name
from varstash.store import VariableStore

app = typer.Typer(name="varstash", help="Inspect content-addressed variable stores")
console = Console()


def _open_store(store: Optional[str], root: Optional[Path], verbose: bool) -> VariableStore:
    settings = StashSettings()
    setup_logging(settings, verbose=verbose)
    try:
        return VariableStore(store, root=root, settings=settings)
    except VarStashError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("list")
def list_entries(
    store: Optional[str] = typer.Option(None, "--store", "-s", help="Store directory name"),
    root: Optional[Path] = typer.Option(None, "--root", help="Directory containing the store"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List stored entries with their digests and load-time identifiers."""
    var_store = _open_store(store, root, verbose)
    try:
        digests = var_store.stored_digests()
    except VarStashError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    table = Table(title=str(var_store.working_path))
    table.add_column("Name")
    table.add_column("Digest")
    table.add_column("Identifier")
    for name, digest in digests.items():
        table.add_row(name, f"{digest:016x}", sanitize_name(name))
    console.print(table)
    console.print(f"{len(digests)} entries")


@app.command()
def drift(
    store: Optional[str] = typer.Option(None, "--store", "-s", help="Store directory name"),
    root: Optional[Path] = typer.Option(None, "--root", help="Directory containing the store"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Report blobs missing from disk and blobs not listed in the metadata."""
    var_store = _open_store(store, root, verbose)
    try:
        report = var_store.check_drift()
    except VarStashError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    if report.is_clean:
        console.print("[green]No drift[/green]")
        return
    for name in report.missing:
        console.print(f"[yellow]missing[/yellow]  {name}")
    for name in report.orphaned:
        console.print(f"[yellow]orphaned[/yellow] {name}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
