"""
Commandes CLI : parse-url, ls, browse, token, b64encode, b64decode.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from aircat.adapters.cli.helpers import abort_on_error, console, entries_table
from aircat.container import Container
from aircat.utils.codec import base64_decode, base64_encode
from aircat.utils.filters import skip_hidden
from aircat.utils.sorting import alphasort, alphasort_folders_first
from aircat.utils.tokens import random_string


def parse_url(
    url: Annotated[str, typer.Argument(help="URL a decomposer (http ou https)")],
) -> None:
    """Decompose une URL et affiche ses composants."""
    container = Container()
    with abort_on_error():
        descriptor = container.locator_parser().parse(url)

    table = Table(title=url, show_header=False)
    table.add_row("Schema", descriptor.scheme.value)
    table.add_row("Hote", descriptor.host)
    table.add_row("Port", str(descriptor.port))
    table.add_row("Utilisateur", descriptor.username if descriptor.has_credentials else "-")
    table.add_row("Mot de passe", "***" if descriptor.password is not None else "-")
    table.add_row("Chemin", descriptor.path)
    console.print(table)


def ls(
    path: Annotated[Path, typer.Argument(help="Repertoire a lister")] = Path("."),
    folders_first: Annotated[
        bool,
        typer.Option("--folders-first", "-f", help="Afficher les dossiers en premier"),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Inclure les entrees cachees"),
    ] = False,
) -> None:
    """Liste un repertoire en ordre naturel."""
    container = Container()
    with abort_on_error():
        entries = container.directory_lister().list(
            path,
            include=None if show_all else skip_hidden,
            compare=alphasort_folders_first if folders_first else alphasort,
        )
    console.print(entries_table(str(path), entries))


def browse(
    relative: Annotated[
        str,
        typer.Argument(help="Chemin relatif a la racine de la mediatheque"),
    ] = "",
) -> None:
    """Parcourt la mediatheque (dossiers puis fichiers audio)."""
    container = Container()
    browser = container.media_browser()
    with abort_on_error():
        entries = browser.browse(relative)
    console.print(entries_table(f"/{relative}", entries))


def token(
    length: Annotated[
        Optional[int],
        typer.Option("--length", "-n", min=0, help="Longueur du jeton (defaut: config)"),
    ] = None,
) -> None:
    """Genere un jeton aleatoire."""
    if length is None:
        length = Container().config().token_length
    typer.echo(random_string(length))


def b64encode(
    text: Annotated[str, typer.Argument(help="Texte a encoder (UTF-8)")],
) -> None:
    """Encode un texte en base64."""
    typer.echo(base64_encode(text.encode("utf-8")))


def b64decode(
    text: Annotated[str, typer.Argument(help="Chaine base64 a decoder")],
) -> None:
    """Decode une chaine base64 et affiche le resultat en UTF-8."""
    with abort_on_error():
        data = base64_decode(text)
    typer.echo(data.decode("utf-8", errors="replace"))
