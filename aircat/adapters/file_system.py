"""
Adaptateur pour le listing de repertoires.

Implementation concrete de IDirectoryLister sur le systeme de fichiers reel.
Chaque entree est lue via stat() puis filtree et triee selon les fonctions
injectees par l'appelant.
"""

import functools
import os
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from aircat.core.errors import EntryNameError, ScanError, ScanErrorKind
from aircat.core.ports.file_system import EntryComparator, EntryPredicate, IDirectoryLister
from aircat.core.value_objects import DirectoryEntry

# Marqueurs du repertoire courant et parent
_DOT_ENTRIES: frozenset[str] = frozenset({".", ".."})


class DirectoryLister(IDirectoryLister):
    """
    Implementation de IDirectoryLister pour le systeme de fichiers reel.

    Politique d'erreur:
    - l'ouverture du repertoire est le seul point d'echec fatal (ScanError)
    - une entree dont le stat() echoue (supprimee entre l'enumeration et
      le stat, lien casse...) est ignoree sans interrompre le scan
    - une entree dont le nom depasse NAME_MAX octets est ignoree

    Le resultat n'est retourne qu'une fois le scan complet : jamais de
    resultat partiel en cas d'erreur.
    """

    def __init__(self, follow_symlinks: bool = True) -> None:
        """
        Initialise le lister.

        Args:
            follow_symlinks: Si True, les liens sont resolus par stat()
                (un lien vers un dossier est vu comme un dossier)
        """
        self._follow_symlinks = follow_symlinks

    def list(
        self,
        path: Union[str, Path],
        include: Optional[EntryPredicate] = None,
        compare: Optional[EntryComparator] = None,
    ) -> list[DirectoryEntry]:
        """
        Enumere un repertoire en entrees triees.

        Args:
            path: Repertoire a lister
            include: Predicat d'inclusion evalue apres stat() (toutes si None)
            compare: Fonction cmp d'ordre total (ordre du systeme si None)

        Returns:
            Liste des entrees retenues, triee selon compare.

        Raises:
            ScanError: NOT_FOUND, NOT_A_DIRECTORY, PERMISSION_DENIED ou IO_ERROR
        """
        directory = Path(path)
        entries: list[DirectoryEntry] = []
        skipped = 0

        try:
            handle = os.scandir(directory)
        except OSError as e:
            raise self._scan_error(e, directory) from e

        # Seules l'ouverture et la lecture du repertoire sont converties en
        # ScanError : les exceptions de include/compare remontent telles quelles
        with handle as iterator:
            raw_entries = iter(iterator)
            while True:
                try:
                    raw = next(raw_entries)
                except StopIteration:
                    break
                except OSError as e:
                    raise self._scan_error(e, directory) from e

                if raw.name in _DOT_ENTRIES:
                    continue
                entry = self._read_entry(raw)
                if entry is None:
                    skipped += 1
                    continue
                if include is not None and not include(entry):
                    continue
                entries.append(entry)

        if compare is not None:
            entries.sort(key=functools.cmp_to_key(compare))

        logger.debug(
            f"Scan de {directory}: {len(entries)} entrees retenues, {skipped} ignorees"
        )
        return entries

    def _read_entry(self, raw: os.DirEntry) -> Optional[DirectoryEntry]:
        """
        Lit les metadonnees d'une entree brute.

        Returns:
            DirectoryEntry, ou None si l'entree doit etre ignoree.
        """
        try:
            st = os.stat(raw.path, follow_symlinks=self._follow_symlinks)
        except OSError as e:
            logger.debug(f"Entree ignoree (stat impossible): {raw.path}: {e}")
            return None

        try:
            return DirectoryEntry.from_stat(raw.name, st)
        except EntryNameError as e:
            logger.warning(f"Entree ignoree: {e}")
            return None

    @staticmethod
    def _scan_error(error: OSError, directory: Path) -> ScanError:
        """Convertit une erreur d'ouverture ou de lecture en ScanError."""
        if isinstance(error, FileNotFoundError):
            kind = ScanErrorKind.NOT_FOUND
        elif isinstance(error, NotADirectoryError):
            kind = ScanErrorKind.NOT_A_DIRECTORY
        elif isinstance(error, PermissionError):
            kind = ScanErrorKind.PERMISSION_DENIED
        else:
            kind = ScanErrorKind.IO_ERROR
        return ScanError(kind, directory)
