"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour le
serveur qui embarque ce noyau.
"""

from dependency_injector import containers, providers

from .adapters.file_system import DirectoryLister
from .adapters.parsing.locator_parser import LocatorParser
from .config import Settings
from .services.media_browser import MediaBrowserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        descriptor = container.locator_parser().parse("http://host/")
        entries = container.media_browser().browse("Albums")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - sans etat, partageables entre threads
    locator_parser = providers.Singleton(LocatorParser)
    directory_lister = providers.Singleton(
        DirectoryLister,
        follow_symlinks=config.provided.follow_symlinks,
    )

    # Services
    media_browser = providers.Factory(
        MediaBrowserService,
        directory_lister=directory_lister,
        settings=config,
    )
