"""
Interface port pour le parsing d'URL.
"""

from abc import ABC, abstractmethod

from aircat.core.value_objects import LocatorDescriptor


class ILocatorParser(ABC):
    """
    Interface pour la décomposition d'URL.

    Transforme une chaîne de type scheme://[user[:pass]@]host[:port][/path]
    en LocatorDescriptor.
    """

    @abstractmethod
    def parse(self, text: str) -> LocatorDescriptor:
        """
        Décompose une URL.

        Args :
            text : URL à interpréter

        Retourne :
            LocatorDescriptor avec le port toujours renseigné

        Lève :
            ParseError : schéma non supporté, hôte vide ou port invalide
        """
        ...
