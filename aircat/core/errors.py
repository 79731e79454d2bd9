"""
Taxonomie des erreurs du noyau AirCat.

Chaque famille d'erreur porte un `kind` (enum) qui identifie la cause precise.
Les erreurs sont remontees a l'appelant immediat : aucune n'est relancee
en interne, aucune n'est fatale pour le processus.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ParseErrorKind(Enum):
    """Cause d'un echec de parsing d'URL."""

    UNSUPPORTED_SCHEME = "unsupported_scheme"
    INVALID_HOST = "invalid_host"
    INVALID_PORT = "invalid_port"


class ScanErrorKind(Enum):
    """Cause d'un echec d'ouverture de repertoire."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"


class CodecErrorKind(Enum):
    """Cause d'un echec de decodage."""

    INVALID_INPUT = "invalid_input"


class AircatError(Exception):
    """Classe de base de toutes les erreurs AirCat."""


class ParseError(AircatError):
    """
    Exception levee quand une URL ne peut pas etre interpretee.

    Attributes:
        kind: Cause de l'echec
        text: Texte d'entree fautif
    """

    def __init__(self, kind: ParseErrorKind, text: str, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.text = text
        message = f"{kind.value}: {text!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ScanError(AircatError):
    """
    Exception levee quand un repertoire ne peut pas etre ouvert.

    Attributes:
        kind: Cause de l'echec
        path: Chemin demande
    """

    def __init__(self, kind: ScanErrorKind, path: Union[str, Path]) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"{kind.value}: {self.path}")


class CodecError(AircatError):
    """Exception levee quand une chaine base64 est invalide."""

    def __init__(self, kind: CodecErrorKind, detail: str) -> None:
        self.kind = kind
        super().__init__(f"{kind.value}: {detail}")


class EntryNameError(ValueError):
    """Nom d'entree invalide ou depassant la taille maximale (NAME_MAX octets)."""
