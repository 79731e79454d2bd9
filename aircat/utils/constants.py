"""
Constantes partagees du noyau AirCat.
"""

import string

# Extensions audio navigables dans la mediatheque
AUDIO_EXTENSIONS: frozenset[str] = frozenset({
    ".mp3", ".m4a", ".aac", ".mp4", ".ogg", ".oga", ".opus",
    ".flac", ".wav", ".aif", ".aiff", ".wma", ".ape", ".wv",
})

# Alphabet des jetons aleatoires (62 caracteres alphanumeriques)
TOKEN_ALPHABET: str = string.ascii_letters + string.digits

# Longueur par defaut des jetons de session
DEFAULT_TOKEN_LENGTH: int = 32
