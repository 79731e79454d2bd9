"""
Utilitaires et constantes pour AirCat.

Ce module contient le tri naturel, les filtres d'entrees,
le codec base64 et le generateur de jetons.
"""

from aircat.utils.codec import base64_decode, base64_decode_in_place, base64_encode
from aircat.utils.constants import AUDIO_EXTENSIONS, DEFAULT_TOKEN_LENGTH, TOKEN_ALPHABET
from aircat.utils.filters import include_all, media_selector, skip_hidden
from aircat.utils.sorting import alphasort, alphasort_folders_first, natural_compare
from aircat.utils.tokens import random_string

__all__ = [
    "AUDIO_EXTENSIONS",
    "DEFAULT_TOKEN_LENGTH",
    "TOKEN_ALPHABET",
    "alphasort",
    "alphasort_folders_first",
    "base64_decode",
    "base64_decode_in_place",
    "base64_encode",
    "include_all",
    "media_selector",
    "natural_compare",
    "random_string",
    "skip_hidden",
]
