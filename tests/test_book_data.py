# tests/test_book_data.py
"""
Tests for book_data.py - canonical book tables and alias lookup.
"""

import pytest

from bible_refs.services.references.book_data import (
    BOOKS,
    BOOKS_BY_NAME,
    BOOKS_BY_ABBREV,
    BOOK_CHAPTERS,
    CanonicalBook,
    ReferenceDataset,
    get_dataset,
)


def test_canon_has_66_books():
    assert len(BOOKS) == 66
    assert len(get_dataset()) == 66
    assert sum(BOOK_CHAPTERS.values()) == 1189


def test_tables_are_aligned():
    assert set(BOOKS_BY_ABBREV) == set(BOOK_CHAPTERS)
    assert set(BOOKS_BY_NAME.values()) == set(BOOKS_BY_ABBREV)


def test_display_name_round_trip():
    """Every abbreviation gives back the name it was loaded with."""
    dataset = get_dataset()
    for book in BOOKS:
        assert dataset.display_name(book.abbreviation) == book.name
        assert dataset.display_name(book.abbreviation) == BOOKS_BY_ABBREV[book.abbreviation]
        assert dataset.chapter_count(book.abbreviation) == book.chapters


def test_every_alias_resolves_to_its_book():
    dataset = get_dataset()
    for alias, abbrev in BOOKS_BY_NAME.items():
        assert dataset.abbreviation_for(alias) == abbrev
        assert dataset.abbreviation_for(alias.upper()) == abbrev
        assert dataset.abbreviation_for(alias.lower()) == abbrev


def test_alias_lookup_ignores_accents_and_case():
    dataset = get_dataset()
    for alias in ("João", "Joao", "JOAO", "joão", "John", "JOHN"):
        assert dataset.abbreviation_for(alias) == "jo", alias
    assert dataset.abbreviation_for("Oseias") == dataset.abbreviation_for("Oséias") == "os"
    assert dataset.abbreviation_for("Jó") == "job"
    assert dataset.abbreviation_for("1 joao") == "1jo"


def test_unknown_alias_returns_none():
    dataset = get_dataset()
    assert dataset.abbreviation_for("Hezekiah") is None
    assert dataset.abbreviation_for("") is None
    assert dataset.display_name("xx") is None
    assert dataset.chapter_count("xx") == 0


def test_aliases_keep_declaration_order():
    aliases = get_dataset().aliases
    assert aliases[0] == "Gênesis"
    assert aliases.index("Cânticos") < aliases.index("Cântico dos Cânticos")
    assert aliases[-1] == "Revelation"


def test_colliding_aliases_rejected():
    books = [
        CanonicalBook("aa", "Alpha", 1, ("Alpha",)),
        CanonicalBook("bb", "Beta", 1, ("Beta", "ALPHA")),
    ]
    with pytest.raises(ValueError, match="collides"):
        ReferenceDataset(books)


def test_duplicate_abbreviation_rejected():
    books = [
        CanonicalBook("aa", "Alpha", 1, ("Alpha",)),
        CanonicalBook("aa", "Beta", 1, ("Beta",)),
    ]
    with pytest.raises(ValueError, match="Duplicate"):
        ReferenceDataset(books)


def test_same_alias_twice_for_one_book_is_allowed():
    dataset = ReferenceDataset([CanonicalBook("am", "Amós", 9, ("Amós", "Amos"))])
    assert dataset.abbreviation_for("AMOS") == "am"
    assert dataset.aliases == ("Amós", "Amos")
