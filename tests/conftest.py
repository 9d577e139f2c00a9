# tests/conftest.py
"""
Shared test helpers: an in-memory verse API that records every call.
"""

import pytest

from bible_refs.config import ClientConfig
from bible_refs.services.references import Verse, VerseFetcher
from bible_refs.services.references.verse_client import verse_path


class FakeVerseApi(VerseFetcher):
    """
    Serves "<abbrev> <chapter>:<n>" as verse text for any verse.

    Paths listed in `failures` raise the mapped exception class instead.
    """

    def __init__(self, failures: dict = None, chapter_size: int = 3):
        self.failures = failures or {}
        self.chapter_size = chapter_size
        self.calls = []
        self.closed = False

    def _check(self, path: str):
        self.calls.append(path)
        error = self.failures.get(path)
        if error is not None:
            raise error(path)

    async def fetch_chapter(self, version, abbrev, chapter):
        self._check(verse_path(version, abbrev, chapter))
        return [
            Verse(n, f"{abbrev} {chapter}:{n}")
            for n in range(1, self.chapter_size + 1)
        ]

    async def fetch_verse(self, version, abbrev, chapter, number):
        self._check(verse_path(version, abbrev, chapter, number))
        return Verse(number, f"{abbrev} {chapter}:{number}")

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_api():
    return FakeVerseApi()


@pytest.fixture
def make_api():
    """Factory for FakeVerseApi with custom failures."""
    return FakeVerseApi


@pytest.fixture
def config():
    return ClientConfig(
        base_url="https://bible.test/api",
        token="secret",
        default_version="acf",
    )

