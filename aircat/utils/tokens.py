"""
Generateur de jetons aleatoires pour l'authentification et les sessions.
"""

import secrets

from aircat.utils.constants import TOKEN_ALPHABET


def random_string(size: int) -> str:
    """
    Genere une chaine aleatoire de `size` caracteres alphanumeriques.

    La source est le generateur cryptographique du systeme (secrets) :
    avec 62 symboles, un jeton de 32 caracteres porte environ 190 bits.

    Raises:
        ValueError: si size est negatif
    """
    if size < 0:
        raise ValueError(f"La taille du jeton doit etre positive (recu: {size})")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(size))
