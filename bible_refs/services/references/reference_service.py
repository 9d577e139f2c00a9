# bible_refs/services/references/reference_service.py
"""
Unified reference service: find references in text and fetch their verses.

Wires the shared dataset and matcher to a verse fetcher (the Bible API by
default) behind one object.
"""

import logging
from typing import Iterable, Optional

from bible_refs.config import ClientConfig, load_config

from .book_data import get_dataset
from .range_resolver import RangeResolver, ResolvedReference
from .reference_matcher import ReferenceMatch, build_matcher
from .verse_client import BibleApiClient, VerseFetcher

logger = logging.getLogger(__name__)


class ReferenceService:
    """
    Find scripture references in text and resolve them into verses.

    Usage:
        async with ReferenceService() as service:
            matches = service.match_references("Joao 1:1-3 kjv")
            for result in await service.resolve_all(matches):
                print(result.text)

            # Or in one step
            results = await service.lookup("Salmos 23", version="nvi")
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        fetcher: Optional[VerseFetcher] = None,
    ):
        self.config = config or load_config()
        self.dataset = get_dataset()
        self.matcher = build_matcher(tuple(self.config.supported_versions))
        self.fetcher = fetcher or BibleApiClient(
            self.config.base_url,
            token=self.config.token,
            timeout=self.config.timeout,
        )
        self.resolver = RangeResolver(self.dataset, self.fetcher, self.config.default_version)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        await self.fetcher.aclose()

    def match_references(self, text: str) -> list[ReferenceMatch]:
        """Find every reference in text, in order. Never raises."""
        return self.matcher.find_references(text)

    async def resolve_all(
        self,
        matches: Iterable[ReferenceMatch],
        version: Optional[str] = None,
    ) -> list[ResolvedReference]:
        """
        Fetch verses for each match, in input order.

        Args:
            matches: Matches from match_references()
            version: Version for references that do not name one.
                     Defaults to the configured default version.

        Returns:
            One ResolvedReference per match
        """
        return await self.resolver.resolve_all(matches, version)

    async def lookup(self, text: str, version: Optional[str] = None) -> list[ResolvedReference]:
        """Find references in text and resolve them."""
        matches = self.match_references(text)
        logger.debug(f"Resolving {len(matches)} references")
        return await self.resolve_all(matches, version)
