"""
Predicats d'inclusion standards pour le listing de repertoires.

Les predicats recoivent un DirectoryEntry deja renseigne (apres stat)
et retournent False pour omettre l'entree.
"""

from pathlib import PurePath
from typing import Iterable

from aircat.core.ports.file_system import EntryPredicate
from aircat.core.value_objects import DirectoryEntry


def include_all(entry: DirectoryEntry) -> bool:
    """Conserve toutes les entrees."""
    return True


def skip_hidden(entry: DirectoryEntry) -> bool:
    """Omet les entrees cachees (nom commencant par '.')."""
    return not entry.name.startswith(".")


def media_selector(extensions: Iterable[str], show_hidden: bool = False) -> EntryPredicate:
    """
    Construit un predicat pour la navigation dans la mediatheque.

    Conserve les repertoires et les fichiers reguliers dont l'extension
    (insensible a la casse) appartient a `extensions`.

    Args:
        extensions: Extensions acceptees, avec le point (ex: ".flac")
        show_hidden: Conserver les entrees cachees

    Returns:
        Predicat utilisable par IDirectoryLister.list
    """
    allowed = frozenset(ext.lower() for ext in extensions)

    def select(entry: DirectoryEntry) -> bool:
        if not show_hidden and not skip_hidden(entry):
            return False
        if entry.is_dir:
            return True
        return entry.is_file and PurePath(entry.name).suffix.lower() in allowed

    return select
