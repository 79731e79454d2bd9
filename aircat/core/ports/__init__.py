"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports parsing :
- ILocatorParser : Décomposition d'une URL en LocatorDescriptor

Ports système de fichiers :
- IDirectoryLister : Enumération d'un répertoire en DirectoryEntry
- EntryPredicate : Prédicat d'inclusion d'une entrée
- EntryComparator : Fonction de comparaison entre deux entrées
"""

from aircat.core.ports.file_system import (
    EntryComparator,
    EntryPredicate,
    IDirectoryLister,
)
from aircat.core.ports.parser import ILocatorParser

__all__ = [
    # Parsing
    "ILocatorParser",
    # Système de fichiers
    "IDirectoryLister",
    "EntryPredicate",
    "EntryComparator",
]
