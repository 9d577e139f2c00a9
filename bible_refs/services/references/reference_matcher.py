# bible_refs/services/references/reference_matcher.py
"""
Scripture reference detection in free text.

A single compiled pattern finds every reference of the form

    <book> <chapter>[(:|.)<verse>[-<verse>]] [<version>]

e.g. "John 1:1-3 kjv", "Gênesis 50", "joao 3.16". Book names come from the
reference dataset and match regardless of case or accents.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from .book_data import ReferenceDataset, get_dataset
from .text_normalizer import escape_for_pattern, fold_diacritics_for_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceMatch:
    """
    A reference found in text.

    Attributes:
        book_alias: Book name exactly as written (e.g., "joao")
        chapter: Chapter number
        from_verse: First verse, None for a whole chapter
        to_verse: Last verse, None unless a range was given
        version_tag: Lowercase version code (e.g., "kjv"), None if absent
        original: The matched text, trimmed
    """
    book_alias: str
    chapter: int
    from_verse: Optional[int] = None
    to_verse: Optional[int] = None
    version_tag: Optional[str] = None
    original: str = ""

    @property
    def is_chapter(self) -> bool:
        """True if no verse was given."""
        return self.from_verse is None

    @property
    def is_range(self) -> bool:
        return self.from_verse is not None and self.to_verse is not None

    def __str__(self) -> str:
        ref = f"{self.book_alias} {self.chapter}"
        if self.from_verse is not None:
            ref += f":{self.from_verse}"
            if self.to_verse is not None:
                ref += f"-{self.to_verse}"
        if self.version_tag:
            ref += f" {self.version_tag}"
        return ref


def build_pattern(aliases: Iterable[str], versions: Iterable[str] = ()) -> str:
    """
    Build the composite reference pattern.

    Args:
        aliases: Book aliases, tried in the given order
        versions: Version codes accepted after the reference. When empty the
            version group is left out entirely.

    Returns:
        Uncompiled pattern; compile with re.IGNORECASE | re.MULTILINE
    """
    book_names = "|".join(_alias_pattern(alias) for alias in aliases)

    begin = r"(?:^|(?<=[\s,;]))"
    book = "(?P<book>" + fold_diacritics_for_pattern(book_names) + ")"
    chapter = (
        r"\s+(?P<chapter>[0-9]+)"
        r"(?:\s*[:.]\s*(?P<from_verse>[0-9]+)(?:\s*-\s*(?P<to_verse>[0-9]+))?)?"
    )
    terminator = r"(?=\s|$)"

    version = ""
    versions = [v for v in versions if v and v.strip()]
    if versions:
        version_names = "|".join(escape_for_pattern(v.strip()) for v in versions)
        version = r"(?:\s+(?P<version>" + version_names + "))?"

    return begin + book + chapter + version + terminator


def _alias_pattern(alias: str) -> str:
    """Escaped alias whose inner spaces match any run of whitespace."""
    return r"\s+".join(escape_for_pattern(part) for part in alias.split())


class ReferenceMatcher:
    """
    Finds scripture references in text.

    Build once per configuration and share: the compiled pattern and the
    dataset are never modified after construction.

    Usage:
        matcher = ReferenceMatcher(get_dataset(), versions=["kjv", "nvi"])
        for match in matcher.find_references("Leia João 3:16 nvi hoje"):
            print(match.book_alias, match.chapter, match.from_verse)
    """

    def __init__(self, dataset: ReferenceDataset, versions: Iterable[str] = ()):
        self.dataset = dataset
        self.versions = tuple(v.strip().lower() for v in versions if v and v.strip())
        self.pattern = re.compile(
            build_pattern(dataset.aliases, self.versions),
            re.IGNORECASE | re.MULTILINE,
        )

    @property
    def supports_version_tags(self) -> bool:
        return bool(self.versions)

    def find_references(self, text: str) -> list[ReferenceMatch]:
        """
        Find all references in a text block, in order of appearance.

        Args:
            text: Text to search (may span several lines)

        Returns:
            List of ReferenceMatch objects; empty if nothing matched
        """
        if not text:
            return []

        matches = []
        for m in self.pattern.finditer(text):
            groups = m.groupdict()
            version = groups.get("version")
            matches.append(ReferenceMatch(
                book_alias=groups["book"],
                chapter=int(groups["chapter"]),
                from_verse=_optional_int(groups["from_verse"]),
                to_verse=_optional_int(groups["to_verse"]),
                version_tag=version.lower() if version else None,
                original=m.group().strip(),
            ))

        logger.debug(f"Found {len(matches)} references in {len(text)} chars")
        return matches


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value is not None else None


@lru_cache(maxsize=8)
def build_matcher(versions: tuple = ()) -> ReferenceMatcher:
    """Return a shared matcher over the default dataset for a version set."""
    return ReferenceMatcher(get_dataset(), versions)
