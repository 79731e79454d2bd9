"""
Tests unitaires pour le tri naturel.

Couvre natural_compare (chiffres par valeur, casse ASCII, ordre total)
et les comparateurs alphasort / alphasort_folders_first.
"""

import functools

import pytest

from aircat.utils.sorting import alphasort, alphasort_folders_first, natural_compare


def _sorted_names(names: list[str]) -> list[str]:
    return sorted(names, key=functools.cmp_to_key(natural_compare))


class TestNaturalCompare:
    """Tests pour natural_compare."""

    def test_numbers_compare_by_value(self) -> None:
        """'file2' passe avant 'file10'."""
        assert natural_compare("file2", "file10") < 0
        assert natural_compare("file10", "file2") > 0

    def test_identical_names_are_equal(self) -> None:
        assert natural_compare("track01.flac", "track01.flac") == 0

    def test_case_insensitive_ascii(self) -> None:
        """La casse ASCII n'influe que pour departager des noms egaux."""
        assert natural_compare("apple", "Banana") < 0
        assert natural_compare("Apple", "banana") < 0

    def test_case_tiebreak_gives_total_order(self) -> None:
        """'Track' et 'track' ne sont pas egaux : ordre brut en dernier recours."""
        assert natural_compare("Track", "track") < 0
        assert natural_compare("track", "Track") > 0

    def test_leading_zeros_tiebreak(self) -> None:
        """A valeur egale, la suite la plus courte passe en premier."""
        assert natural_compare("track1", "track01") < 0
        assert natural_compare("track01", "track1") > 0

    def test_numeric_value_beats_leading_zeros(self) -> None:
        """La valeur numerique prime sur les zeros de tete."""
        assert natural_compare("track002", "track10") < 0

    def test_prefix_sorts_first(self) -> None:
        assert natural_compare("disc", "disc1") < 0

    def test_large_numbers(self) -> None:
        """Les suites de chiffres ne sont pas bornees."""
        assert natural_compare("x99999999999999999999", "x100000000000000000000") < 0

    def test_punctuation_compares_as_characters(self) -> None:
        """Hors chiffres, la comparaison est caractere par caractere (ASCII)."""
        assert natural_compare("a.txt", "a1.txt") < 0

    def test_non_ascii_is_not_folded(self) -> None:
        """Pas de collation internationale : 'É' et 'é' restent distincts."""
        assert natural_compare("É", "é") != 0

    def test_sorted_sequence(self) -> None:
        names = ["Track 10", "track 2", "Track 1", "track 01", "Intro", "track 2b"]
        assert _sorted_names(names) == [
            "Intro",
            "Track 1",
            "track 01",
            "track 2",
            "track 2b",
            "Track 10",
        ]

    @pytest.mark.parametrize(
        "a,b",
        [("a2", "a10"), ("B", "a"), ("x01", "x1"), ("z", "Z"), ("1", "a")],
    )
    def test_antisymmetric(self, a: str, b: str) -> None:
        assert natural_compare(a, b) == -natural_compare(b, a)


class TestAlphasort:
    """Tests pour les comparateurs d'entrees."""

    def test_alphasort_ignores_type(self, make_entry) -> None:
        """alphasort ne regarde que le nom."""
        entries = [make_entry("b"), make_entry("a", is_dir=True), make_entry("A2"), make_entry("a10")]
        result = sorted(entries, key=functools.cmp_to_key(alphasort))
        assert [e.name for e in result] == ["a", "A2", "a10", "b"]

    def test_folders_first_example(self, make_entry) -> None:
        """Dossier 'A' en premier, puis les fichiers en ordre naturel."""
        entries = [
            make_entry("b.txt"),
            make_entry("A", is_dir=True),
            make_entry("a2.txt"),
            make_entry("a10.txt"),
        ]
        result = sorted(entries, key=functools.cmp_to_key(alphasort_folders_first))
        assert [e.name for e in result] == ["A", "a2.txt", "a10.txt", "b.txt"]

    def test_folders_first_sorts_each_group(self, make_entry) -> None:
        """Les dossiers sont tries entre eux, les fichiers aussi."""
        entries = [
            make_entry("z.flac"),
            make_entry("Disc 10", is_dir=True),
            make_entry("a.flac"),
            make_entry("Disc 2", is_dir=True),
        ]
        result = sorted(entries, key=functools.cmp_to_key(alphasort_folders_first))
        assert [e.name for e in result] == ["Disc 2", "Disc 10", "a.flac", "z.flac"]

    def test_folder_beats_any_file_name(self, make_entry) -> None:
        assert alphasort_folders_first(make_entry("zzz", is_dir=True), make_entry("0")) < 0
        assert alphasort_folders_first(make_entry("0"), make_entry("zzz", is_dir=True)) > 0
