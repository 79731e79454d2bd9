"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande de diagnostic (Typer)
- parsing/ : Parsing des URL
- file_system : Listing de répertoires

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from aircat.adapters.file_system import DirectoryLister
from aircat.adapters.parsing.locator_parser import LocatorParser

__all__ = [
    "DirectoryLister",
    "LocatorParser",
]
