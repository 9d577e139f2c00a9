# bible_refs/routes/references_api.py
"""
API endpoints for scripture reference detection and verse lookup.

Provides access to:
- Reference detection in text
- Verse resolution for every reference in a text
- The book list (abbreviations, names, chapter counts)
"""

import asyncio

from flask import Blueprint, request, jsonify

from bible_refs.config import ClientConfig, load_config
from bible_refs.services.references import ReferenceService, build_matcher, get_dataset
from bible_refs.utils.errors import invalid_version, text_required, unknown_book

references_bp = Blueprint("references_api", __name__, url_prefix="/api/references")

# Lazily loaded configuration
_config = None


def get_config() -> ClientConfig:
    """Get or load the client configuration."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def create_service() -> ReferenceService:
    """Build a service for one request."""
    return ReferenceService(get_config())


async def _lookup(text: str, version: str = None) -> list:
    async with create_service() as service:
        return await service.lookup(text, version)


def _match_to_dict(match) -> dict:
    dataset = get_dataset()
    abbrev = dataset.abbreviation_for(match.book_alias)
    return {
        "ref": match.original,
        "book": match.book_alias,
        "abbreviation": abbrev,
        "book_name": dataset.display_name(abbrev) if abbrev else None,
        "chapter": match.chapter,
        "from_verse": match.from_verse,
        "to_verse": match.to_verse,
        "version": match.version_tag,
    }


# =============================================================================
# Detection
# =============================================================================

@references_bp.get("/detect")
def detect_references():
    """
    Find scripture references in text without fetching them.

    Query params:
        text: Text to scan (required)

    Returns:
        {
            "count": 2,
            "references": [
                {"ref": "João 3:16 nvi", "abbreviation": "jo", "chapter": 3, ...}
            ]
        }
    """
    text = request.args.get("text")
    if not text:
        return text_required()

    matcher = build_matcher(tuple(get_config().supported_versions))
    matches = matcher.find_references(text)
    return jsonify({
        "count": len(matches),
        "references": [_match_to_dict(m) for m in matches],
    })


# =============================================================================
# Resolution
# =============================================================================

@references_bp.post("/resolve")
def resolve_references():
    """
    Find references in text and fetch their verses.

    Body (JSON):
        text: Text to scan (required)
        version: Version for references that name none (optional)

    Returns:
        {
            "count": 1,
            "results": [
                {
                    "book_name": "João",
                    "chapter": 1,
                    "verses": [{"number": 1, "text": "..."}],
                    "error": null,
                    ...
                }
            ]
        }
    """
    data = request.get_json(silent=True) or {}
    text = data.get("text")
    if not text:
        return text_required()

    version = data.get("version")
    if version is not None and not isinstance(version, str):
        return invalid_version(version)

    results = asyncio.run(_lookup(text, version))
    return jsonify({
        "count": len(results),
        "results": [r.to_dict() for r in results],
    })


# =============================================================================
# Books
# =============================================================================

@references_bp.get("/books")
def list_books():
    """List every book with abbreviation, name and chapter count."""
    return jsonify({
        "books": [
            {"abbreviation": b.abbreviation, "name": b.name, "chapters": b.chapters}
            for b in get_dataset().books
        ]
    })


@references_bp.get("/books/<abbrev>")
def get_book(abbrev: str):
    """Get one book by abbreviation, including its aliases."""
    book = get_dataset().get(abbrev.lower())
    if book is None:
        return unknown_book(abbrev)
    return jsonify({
        "abbreviation": book.abbreviation,
        "name": book.name,
        "chapters": book.chapters,
        "aliases": list(book.aliases),
    })
