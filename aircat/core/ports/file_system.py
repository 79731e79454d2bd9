"""
Interfaces ports pour le système de fichiers.

Le listing de répertoire reçoit sa politique de sélection et d'ordre
sous forme de fonctions injectées, pour servir aussi bien le cas
"toutes les entrées, tri simple" que "dossiers média, dossiers d'abord".
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Union

from aircat.core.value_objects import DirectoryEntry

# Prédicat d'inclusion : False -> l'entrée est omise silencieusement
EntryPredicate = Callable[[DirectoryEntry], bool]

# Comparaison style cmp : négatif, zéro ou positif
EntryComparator = Callable[[DirectoryEntry, DirectoryEntry], int]


class IDirectoryLister(ABC):
    """
    Interface pour l'énumération d'un répertoire.

    Chaque appel est indépendant : aucun état partagé entre deux scans,
    aucun descripteur ne survit à l'appel.
    """

    @abstractmethod
    def list(
        self,
        path: Union[str, Path],
        include: Optional[EntryPredicate] = None,
        compare: Optional[EntryComparator] = None,
    ) -> list[DirectoryEntry]:
        """
        Enumère un répertoire en entrées triées.

        Args :
            path : Répertoire à lister
            include : Prédicat d'inclusion (toutes les entrées si None)
            compare : Ordre total entre entrées (ordre du système si None)

        Retourne :
            Liste des entrées retenues, triée selon compare

        Lève :
            ScanError : répertoire introuvable, pas un répertoire, accès refusé
        """
        ...
