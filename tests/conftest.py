"""
Fixtures pytest partagees pour les tests AirCat.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Arborescence de mediatheque sur disque
- Lister reel et mock de IDirectoryLister
"""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from aircat.adapters.file_system import DirectoryLister
from aircat.config import Settings
from aircat.core.ports.file_system import IDirectoryLister
from aircat.core.value_objects import DirectoryEntry


def _make_entry(name: str, is_dir: bool = False, size: int = 0) -> DirectoryEntry:
    mode = 0o040755 if is_dir else 0o100644
    return DirectoryEntry(
        inode=abs(hash(name)) % 100000,
        mode=mode,
        size=size,
        atime=0.0,
        mtime=0.0,
        ctime=0.0,
        name=name,
    )


@pytest.fixture
def media_tree(tmp_path: Path) -> Path:
    """
    Mediatheque de test:

        music/
            Album 10/
            Album 2/
            .hidden/
            b.txt
            a10.flac
            a2.flac
            cover.jpg
            .DS_Store
    """
    root = tmp_path / "music"
    (root / "Album 10").mkdir(parents=True)
    (root / "Album 2").mkdir()
    (root / ".hidden").mkdir()
    (root / "b.txt").write_text("notes")
    (root / "a10.flac").write_bytes(b"\x00" * 10)
    (root / "a2.flac").write_bytes(b"\x00" * 2)
    (root / "cover.jpg").write_bytes(b"\xff\xd8")
    (root / ".DS_Store").write_bytes(b"")
    return root


@pytest.fixture
def test_settings(tmp_path: Path, media_tree: Path) -> Settings:
    """Settings de test pointant sur la mediatheque temporaire."""
    return Settings(
        media_root=media_tree,
        show_hidden=False,
        follow_symlinks=True,
        token_length=24,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def lister() -> DirectoryLister:
    """Lister reel suivant les liens symboliques."""
    return DirectoryLister()


@pytest.fixture
def mock_directory_lister() -> MagicMock:
    """
    Mock de IDirectoryLister pour les tests.

    Retourne une liste vide par defaut.
    """
    mock = MagicMock(spec=IDirectoryLister)
    mock.list.return_value = []
    return mock


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, test_settings: Settings) -> Settings:
    """Variables d'environnement AIRCAT_ alignees sur test_settings."""
    monkeypatch.setenv("AIRCAT_MEDIA_ROOT", os.fspath(test_settings.media_root))
    monkeypatch.setenv("AIRCAT_LOG_FILE", os.fspath(test_settings.log_file))
    monkeypatch.setenv("AIRCAT_TOKEN_LENGTH", str(test_settings.token_length))
    return test_settings


@pytest.fixture
def make_entry():
    """Fabrique de DirectoryEntry construits sans toucher au disque."""
    return _make_entry
