"""
Fonctions de tri naturel pour les entrees de repertoire.

Le tri naturel compare les noms caractere par caractere sans tenir compte
de la casse ASCII, sauf pour les suites de chiffres qui sont comparees
par valeur numerique : "file2" passe avant "file10".

Les comparateurs suivent la convention cmp (negatif, zero, positif)
et s'utilisent avec functools.cmp_to_key.
"""

import re
import string

from aircat.core.value_objects import DirectoryEntry

_DIGITS = re.compile(r"[0-9]+")

# Repli de casse limite a l'ASCII (pas de collation internationale)
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def natural_compare(a: str, b: str) -> int:
    """
    Compare deux noms selon l'ordre naturel.

    Ordre de decision:
    1. caracteres compares sans casse ASCII, suites de chiffres par valeur
    2. a egalite, le nom ayant le moins de zeros de tete passe en premier
    3. a egalite, comparaison brute (sensible a la casse)

    Retourne 0 uniquement si les deux noms sont identiques.

    Examples:
        >>> natural_compare("file2", "file10")
        -1
        >>> natural_compare("Track", "track")
        -1
    """
    fold_a = a.translate(_ASCII_FOLD)
    fold_b = b.translate(_ASCII_FOLD)
    zeros_tiebreak = 0
    i = j = 0

    while i < len(a) and j < len(b):
        run_a = _DIGITS.match(a, i)
        run_b = _DIGITS.match(b, j)
        if run_a and run_b:
            value_a = int(run_a.group())
            value_b = int(run_b.group())
            if value_a != value_b:
                return -1 if value_a < value_b else 1
            if not zeros_tiebreak:
                # "01" et "1" ont la meme valeur : la suite la plus courte d'abord
                zeros_tiebreak = _sign(len(run_a.group()) - len(run_b.group()))
            i, j = run_a.end(), run_b.end()
            continue

        char_a = fold_a[i]
        char_b = fold_b[j]
        if char_a != char_b:
            return -1 if char_a < char_b else 1
        i += 1
        j += 1

    remaining = _sign((len(a) - i) - (len(b) - j))
    if remaining:
        return remaining
    if zeros_tiebreak:
        return zeros_tiebreak
    return (a > b) - (a < b)


def alphasort(a: DirectoryEntry, b: DirectoryEntry) -> int:
    """Tri naturel simple sur le nom des entrees."""
    return natural_compare(a.name, b.name)


def alphasort_folders_first(a: DirectoryEntry, b: DirectoryEntry) -> int:
    """
    Tri naturel avec les dossiers en premier.

    Les repertoires passent strictement avant toutes les autres entrees,
    puis chaque groupe est trie avec alphasort.
    """
    if a.is_dir != b.is_dir:
        return -1 if a.is_dir else 1
    return alphasort(a, b)
