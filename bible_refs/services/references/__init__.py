# bible_refs/services/references/__init__.py
"""
Scripture reference detection and verse retrieval.

This package provides:
- ReferenceService: Find references in text and fetch their verses
- ReferenceMatcher / ReferenceMatch: Reference detection in free text
- RangeResolver / ResolvedReference: Chapter, verse and range resolution
- BibleApiClient: Async client for the Bible REST API
- ReferenceDataset: Book names, abbreviations and chapter counts
- normalize: Case/accent folding used for book lookup
"""

from .text_normalizer import (
    normalize,
    escape_for_pattern,
    fold_diacritics_for_pattern,
)
from .book_data import (
    CanonicalBook,
    ReferenceDataset,
    get_dataset,
    BOOKS,
    BOOKS_BY_NAME,
    BOOKS_BY_ABBREV,
    BOOK_CHAPTERS,
)
from .errors import (
    ErrorKind,
    VerseApiError,
    VerseNotFoundError,
    UnexpectedResponseError,
    VerseApiFailure,
)
from .reference_matcher import (
    ReferenceMatch,
    ReferenceMatcher,
    build_matcher,
)
from .verse_client import (
    Verse,
    VerseFetcher,
    BibleApiClient,
)
from .range_resolver import (
    RangeResolver,
    ResolvedReference,
)
from .reference_service import ReferenceService

__all__ = [
    # Unified Service (primary interface)
    "ReferenceService",
    # Normalization
    "normalize",
    "escape_for_pattern",
    "fold_diacritics_for_pattern",
    # Dataset
    "CanonicalBook",
    "ReferenceDataset",
    "get_dataset",
    "BOOKS",
    "BOOKS_BY_NAME",
    "BOOKS_BY_ABBREV",
    "BOOK_CHAPTERS",
    # Errors
    "ErrorKind",
    "VerseApiError",
    "VerseNotFoundError",
    "UnexpectedResponseError",
    "VerseApiFailure",
    # Matching
    "ReferenceMatch",
    "ReferenceMatcher",
    "build_matcher",
    # Fetching
    "Verse",
    "VerseFetcher",
    "BibleApiClient",
    # Resolution
    "RangeResolver",
    "ResolvedReference",
]
