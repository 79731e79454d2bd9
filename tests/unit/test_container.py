"""
Tests unitaires pour le container DI.
"""

from pathlib import Path

import pytest

from aircat.adapters.file_system import DirectoryLister
from aircat.adapters.parsing.locator_parser import LocatorParser
from aircat.config import Settings
from aircat.container import Container
from aircat.services.media_browser import MediaBrowserService


class TestContainer:
    """Tests pour le cablage des dependances."""

    def test_adapters_are_singletons(self, isolated_env: Settings) -> None:
        container = Container()

        assert isinstance(container.locator_parser(), LocatorParser)
        assert container.locator_parser() is container.locator_parser()
        assert isinstance(container.directory_lister(), DirectoryLister)
        assert container.directory_lister() is container.directory_lister()

    def test_media_browser_uses_configured_root(self, isolated_env: Settings) -> None:
        container = Container()
        browser = container.media_browser()

        assert isinstance(browser, MediaBrowserService)
        assert [e.name for e in browser.browse()] == ["Album 2", "Album 10", "a2.flac", "a10.flac"]

    def test_follow_symlinks_from_config(
        self, isolated_env: Settings, monkeypatch: pytest.MonkeyPatch, media_tree: Path
    ) -> None:
        monkeypatch.setenv("AIRCAT_FOLLOW_SYMLINKS", "false")
        (media_tree / "Latest").symlink_to(media_tree / "Album 10")

        lister = Container().directory_lister()
        entries = {e.name: e for e in lister.list(media_tree)}

        assert entries["Latest"].is_symlink
