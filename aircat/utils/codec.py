"""
Codec base64 (alphabet standard, sans retour a la ligne, avec padding).

Utilise par l'authentification HTTP Basic et la gestion de session.
Le decodage est strict : tout caractere hors alphabet ou padding
mal forme est rejete avec CodecError.
"""

import base64
import binascii
import re
from typing import Union

from aircat.core.errors import CodecError, CodecErrorKind

_BASE64_PATTERN = re.compile(
    rb"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?"
)


def base64_encode(data: bytes) -> str:
    """Encode des octets en base64 (padding inclus, pas de retour a la ligne)."""
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: Union[str, bytes, bytearray]) -> bytes:
    """
    Decode une chaine base64.

    Args:
        text: Chaine encodee (str ASCII ou octets)

    Returns:
        Octets decodes, jamais plus longs que l'entree.

    Raises:
        CodecError: caractere hors alphabet, longueur ou padding invalide
    """
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise CodecError(CodecErrorKind.INVALID_INPUT, "non-ASCII character") from e
    else:
        raw = bytes(text)

    if not _BASE64_PATTERN.fullmatch(raw):
        raise CodecError(CodecErrorKind.INVALID_INPUT, "malformed base64 input")
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as e:
        raise CodecError(CodecErrorKind.INVALID_INPUT, str(e)) from e


def base64_decode_in_place(buffer: bytearray) -> int:
    """
    Decode le contenu d'un tampon base64 sur place.

    Le tampon est remplace par les octets decodes. En cas d'erreur
    il n'est pas modifie.

    Returns:
        Nouvelle longueur du tampon
    """
    decoded = base64_decode(buffer)
    buffer[:] = decoded
    return len(decoded)
