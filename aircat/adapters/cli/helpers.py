"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console / err_console : instances Rich Console partagees
- abort_on_error : context manager convertissant les erreurs AirCat en sortie code 1
- entries_table : rendu Rich d'une liste de DirectoryEntry
"""

from contextlib import contextmanager
from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table

from aircat.core.errors import AircatError
from aircat.core.value_objects import DirectoryEntry

console = Console()
err_console = Console(stderr=True)


@contextmanager
def abort_on_error():
    """
    Context manager qui affiche une erreur AirCat et termine avec le code 1.

    Usage:
        with abort_on_error():
            parser.parse(url)
    """
    try:
        yield
    except AircatError as e:
        err_console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1) from e


def _entry_type(entry: DirectoryEntry) -> str:
    if entry.is_dir:
        return "dir"
    if entry.is_file:
        return "file"
    return "other"


def entries_table(title: str, entries: list[DirectoryEntry]) -> Table:
    """Construit un tableau Rich (nom, type, taille, modification)."""
    table = Table(title=title)
    table.add_column("Nom", style="cyan")
    table.add_column("Type")
    table.add_column("Taille", justify="right")
    table.add_column("Modifie le")
    for entry in entries:
        table.add_row(
            entry.name,
            _entry_type(entry),
            str(entry.size) if entry.is_file else "",
            datetime.fromtimestamp(entry.mtime).strftime("%Y-%m-%d %H:%M"),
        )
    return table
