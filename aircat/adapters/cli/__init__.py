"""
Commandes CLI de diagnostic d'AirCat.

Permet d'exercer le noyau (parsing d'URL, listing, codec, jetons)
depuis un terminal, sans demarrer le serveur.
"""

from aircat.adapters.cli.commands import (
    b64decode,
    b64encode,
    browse,
    ls,
    parse_url,
    token,
)

__all__ = [
    "b64decode",
    "b64encode",
    "browse",
    "ls",
    "parse_url",
    "token",
]
