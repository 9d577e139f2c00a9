# bible_refs/services/references/range_resolver.py
"""
Turns reference matches into verse lists.

For each ReferenceMatch the resolver validates the chapter against the
dataset, decides between a single verse, a verse range and a whole chapter,
and fetches the text through a VerseFetcher. Fetch failures end that one
reference early (keeping what was already fetched) and are recorded on the
result; they are never raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .book_data import ReferenceDataset
from .errors import ErrorKind, VerseApiError
from .reference_matcher import ReferenceMatch
from .verse_client import Verse, VerseFetcher

logger = logging.getLogger(__name__)


@dataclass
class ResolvedReference:
    """
    Verses fetched for one reference.

    Attributes:
        book_name: Display name, None if the book was not recognised
        abbreviation: Book abbreviation, None if the book was not recognised
        chapter: Chapter number
        from_verse: First verse requested (None for a whole chapter)
        to_verse: Last verse requested (None unless a range)
        version: Version the verses were requested in
        verses: Verses in increasing order; partial if error is set
        error: Why resolution stopped early, None on success
    """
    book_name: Optional[str]
    abbreviation: Optional[str]
    chapter: int
    from_verse: Optional[int] = None
    to_verse: Optional[int] = None
    version: Optional[str] = None
    verses: list = field(default_factory=list)
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        """Verse texts joined by newlines."""
        return "\n".join(v.text for v in self.verses)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "book_name": self.book_name,
            "abbreviation": self.abbreviation,
            "chapter": self.chapter,
            "from_verse": self.from_verse,
            "to_verse": self.to_verse,
            "version": self.version,
            "verses": [v.to_dict() for v in self.verses],
            "error": self.error.value if self.error else None,
        }


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RangeResolver:
    """
    Resolves matches into verses, one fetch at a time.

    Usage:
        resolver = RangeResolver(get_dataset(), client, default_version="acf")
        results = await resolver.resolve_all(matcher.find_references(text))
        for result in results:
            if result.error:
                print(f"{result.book_name} {result.chapter}: {result.error.value}")
            print(result.text)
    """

    def __init__(self, dataset: ReferenceDataset, fetcher: VerseFetcher, default_version: str):
        self.dataset = dataset
        self.fetcher = fetcher
        self.default_version = default_version

    def choose_version(self, *candidates: Optional[str]) -> str:
        """First non-blank candidate, else the default version."""
        for version in candidates:
            if not is_blank(version):
                return version.strip()
        return self.default_version

    async def resolve(
        self,
        match: ReferenceMatch,
        version_override: Optional[str] = None,
    ) -> ResolvedReference:
        """
        Resolve a single match.

        The version is the one written in the reference, else
        version_override, else the default version.

        Args:
            match: Reference found by the matcher
            version_override: Version for references that name none

        Returns:
            ResolvedReference; check .error for failures
        """
        abbrev = self.dataset.abbreviation_for(match.book_alias)
        version = self.choose_version(match.version_tag, version_override)

        result = ResolvedReference(
            book_name=self.dataset.display_name(abbrev) if abbrev else None,
            abbreviation=abbrev,
            chapter=match.chapter,
            from_verse=match.from_verse,
            to_verse=match.to_verse,
            version=version,
        )

        if abbrev is None:
            logger.info(f"Unknown book '{match.book_alias}' in reference '{match}'")
            result.error = ErrorKind.UNKNOWN_BOOK
            return result

        if not 1 <= match.chapter <= self.dataset.chapter_count(abbrev):
            logger.info(f"Invalid chapter {match.chapter} for {abbrev}")
            result.error = ErrorKind.INVALID_CHAPTER
            return result

        from_verse, to_verse = match.from_verse, match.to_verse

        if from_verse is not None and to_verse is not None:
            # Reversed or non-positive ranges give an empty result, not an error
            if from_verse >= 1 and to_verse >= 1 and from_verse <= to_verse:
                for number in range(from_verse, to_verse + 1):
                    verse = await self._fetch_verse(result, abbrev, number)
                    if verse is None:
                        break
                    result.verses.append(verse)

        elif from_verse is not None:
            if from_verse >= 1:
                verse = await self._fetch_verse(result, abbrev, from_verse)
                if verse is not None:
                    result.verses.append(verse)

        else:
            try:
                verses = await self.fetcher.fetch_chapter(version, abbrev, match.chapter)
            except VerseApiError as e:
                logger.info(f"Chapter fetch failed for {abbrev} {match.chapter}: {e}")
                result.error = e.kind
            except Exception as e:
                logger.warning(f"Unexpected error fetching {abbrev} {match.chapter}: {e}")
                result.error = ErrorKind.FAILURE
            else:
                result.verses.extend(verses)

        return result

    async def _fetch_verse(self, result: ResolvedReference, abbrev: str, number: int) -> Optional[Verse]:
        """Fetch one verse; on failure record the error and return None."""
        logger.debug(f"Fetching {result.version}/{abbrev}/{result.chapter}/{number}")
        try:
            return await self.fetcher.fetch_verse(result.version, abbrev, result.chapter, number)
        except VerseApiError as e:
            logger.info(f"Verse fetch failed for {abbrev} {result.chapter}:{number}: {e}")
            result.error = e.kind
            return None
        except Exception as e:
            logger.warning(f"Unexpected error fetching {abbrev} {result.chapter}:{number}: {e}")
            result.error = ErrorKind.FAILURE
            return None

    async def resolve_all(
        self,
        matches: Iterable[ReferenceMatch],
        version_override: Optional[str] = None,
    ) -> list[ResolvedReference]:
        """
        Resolve matches strictly in order, one at a time.

        A failed reference never stops the batch.
        """
        results = []
        for match in matches:
            results.append(await self.resolve(match, version_override))
        return results
