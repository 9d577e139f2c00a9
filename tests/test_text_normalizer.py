# tests/test_text_normalizer.py
"""
Tests for text_normalizer.py - alias keys and accent-insensitive patterns.
"""

import re

from bible_refs.services.references.text_normalizer import (
    normalize,
    escape_for_pattern,
    fold_diacritics_for_pattern,
    strip_diacritics,
)


def test_normalize_folds_case_and_accents():
    assert normalize("João") == "joao"
    assert normalize("JOÃO") == "joao"
    assert normalize("joao") == "joao"
    assert normalize("Gênesis") == normalize("genesis")
    assert normalize("Cântico dos Cânticos") == "cantico dos canticos"


def test_normalize_collapses_whitespace():
    assert normalize("  1   João\t") == "1 joao"


def test_normalize_empty_string():
    assert normalize("") == ""
    assert strip_diacritics("") == ""


def test_escape_for_pattern():
    escaped = escape_for_pattern("a.b (c)")
    assert re.fullmatch(escaped, "a.b (c)")
    assert not re.fullmatch(escaped, "axb (c)")


def test_fold_matches_accented_and_plain():
    pattern = re.compile(fold_diacritics_for_pattern("João"), re.IGNORECASE)
    for text in ("João", "Joao", "JOÃO", "joão", "Jõao"):
        assert pattern.fullmatch(text), text

    plain = re.compile(fold_diacritics_for_pattern("Joao"), re.IGNORECASE)
    assert plain.fullmatch("João")


def test_fold_keeps_escapes_and_classes():
    folded = fold_diacritics_for_pattern(r"a\sb[ae]")
    pattern = re.compile(folded)
    assert pattern.fullmatch("á\tbe")
    assert r"\s" in folded
    assert folded.endswith("[ae]")


def test_fold_leaves_digits_and_punctuation():
    assert fold_diacritics_for_pattern("1 2-3") == "1 2-3"
