"""
Service de navigation dans la mediatheque.

Expose les deux usages du listing de repertoires :
- navigation dans les dossiers media (fichiers audio, dossiers d'abord)
- listing brut de toutes les entrees (tri naturel simple)
"""

from pathlib import Path, PurePath
from typing import Union

from loguru import logger

from aircat.config import Settings
from aircat.core.errors import ScanError, ScanErrorKind
from aircat.core.ports.file_system import IDirectoryLister
from aircat.core.value_objects import DirectoryEntry
from aircat.utils.filters import media_selector
from aircat.utils.sorting import alphasort, alphasort_folders_first


class MediaBrowserService:
    """
    Service de navigation confine a la racine de la mediatheque.

    Coordonne le lister (IDirectoryLister) avec la configuration
    (racine, extensions, entrees cachees).
    """

    def __init__(self, directory_lister: IDirectoryLister, settings: Settings) -> None:
        """
        Initialise le service.

        Args:
            directory_lister: Implementation de IDirectoryLister
            settings: Configuration de l'application
        """
        self._lister = directory_lister
        self._settings = settings
        self._selector = media_selector(
            settings.media_extensions, show_hidden=settings.show_hidden
        )

    def resolve(self, relative: Union[str, Path] = "") -> Path:
        """
        Resout un chemin relatif sous la racine de la mediatheque.

        Le confinement est lexical : les liens symboliques ne sont pas
        resolus, un album lie hors de la racine reste navigable.
        Tout composant ".." est refuse.

        Raises:
            ScanError: NOT_FOUND si le chemin contient un octet nul,
                PERMISSION_DENIED s'il contient ".."
        """
        text = str(relative)
        if "\x00" in text:
            raise ScanError(ScanErrorKind.NOT_FOUND, text.replace("\x00", "\\0"))

        parts = PurePath(text.lstrip("/")).parts
        if ".." in parts:
            logger.warning(f"Acces refuse hors de la mediatheque: {text}")
            raise ScanError(ScanErrorKind.PERMISSION_DENIED, text)
        return self._settings.media_root.joinpath(*parts)

    def browse(self, relative: Union[str, Path] = "") -> list[DirectoryEntry]:
        """
        Liste un dossier de la mediatheque : dossiers puis fichiers audio.

        Args:
            relative: Chemin relatif a media_root ("" pour la racine)

        Returns:
            Entrees triees dossiers d'abord, en ordre naturel.
        """
        return self._lister.list(
            self.resolve(relative),
            include=self._selector,
            compare=alphasort_folders_first,
        )

    def list_all(self, path: Union[str, Path]) -> list[DirectoryEntry]:
        """Liste toutes les entrees d'un repertoire en ordre naturel."""
        return self._lister.list(path, compare=alphasort)
