"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Scheme : Schema d'URL supporte (HTTP, HTTPS)
- LocatorDescriptor : URL decomposee (schema, hote, port, identifiants, chemin)
- DirectoryEntry : Metadonnees d'une entree de repertoire
- NAME_MAX : Taille maximale d'un nom d'entree en octets
"""

from aircat.core.value_objects.directory_entry import NAME_MAX, DirectoryEntry
from aircat.core.value_objects.locator import LocatorDescriptor, Scheme

__all__ = [
    "Scheme",
    "LocatorDescriptor",
    "DirectoryEntry",
    "NAME_MAX",
]
