"""
Point d'entrée CLI d'AirCat.

Configure le logging et monte les commandes de diagnostic du noyau.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import b64decode, b64encode, browse, ls, parse_url, token
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="aircat",
    help="Outils de diagnostic du noyau AirCat",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs DEBUG sur stderr"),
    ] = False,
) -> None:
    """AirCat - utilitaires du serveur de streaming."""
    settings = container.config()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes depuis commands.py
app.command(name="parse-url")(parse_url)
app.command()(ls)
app.command()(browse)
app.command()(token)
app.command()(b64encode)
app.command()(b64decode)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    logger.info("Configuration AirCat")
    typer.echo(f"Médiathèque : {config.media_root}")
    typer.echo(f"Extensions : {', '.join(sorted(config.media_extensions))}")
    typer.echo(f"Entrées cachées : {'affichées' if config.show_hidden else 'masquées'}")
    typer.echo(f"Suivi des liens : {'oui' if config.follow_symlinks else 'non'}")
    typer.echo(f"Longueur des jetons : {config.token_length}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AirCat core v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
