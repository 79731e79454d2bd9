"""
Objet valeur pour les entrees de repertoire.

Un DirectoryEntry est un instantane des metadonnees d'un fichier au moment
du scan. Il ne garde aucune reference vers le repertoire parent ni aucun
descripteur ouvert.
"""

import os
import stat
from dataclasses import dataclass

from aircat.core.errors import EntryNameError

# Taille maximale d'un nom d'entree, en octets (encodage du systeme de fichiers)
NAME_MAX: int = 255


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Metadonnees d'une entree de repertoire.

    Attributs:
        inode: Identifiant attribue par le systeme de fichiers
        mode: Type et permissions (st_mode)
        size: Taille en octets (significative pour les fichiers reguliers)
        atime: Date du dernier acces (secondes epoch)
        mtime: Date de derniere modification (secondes epoch)
        ctime: Date du dernier changement de statut (secondes epoch)
        name: Nom de l'entree, sans separateur de chemin

    Le nom encode doit tenir dans NAME_MAX octets : un nom trop long
    est rejete avec EntryNameError, jamais tronque.
    """

    inode: int
    mode: int
    size: int
    atime: float
    mtime: float
    ctime: float
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise EntryNameError("Nom d'entree vide")
        if "/" in self.name or "\x00" in self.name:
            raise EntryNameError(f"Nom d'entree invalide: {self.name!r}")
        encoded = os.fsencode(self.name)
        if len(encoded) > NAME_MAX:
            raise EntryNameError(
                f"Nom d'entree trop long ({len(encoded)} > {NAME_MAX} octets): {self.name[:32]!r}..."
            )

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "DirectoryEntry":
        """Construit une entree depuis le resultat d'un stat()."""
        return cls(
            inode=st.st_ino,
            mode=st.st_mode,
            size=st.st_size,
            atime=st.st_atime,
            mtime=st.st_mtime,
            ctime=st.st_ctime,
            name=name,
        )

    @property
    def name_bytes(self) -> bytes:
        """Nom encode pour le systeme de fichiers (au plus NAME_MAX octets)."""
        return os.fsencode(self.name)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)
