# bible_refs/services/references/text_normalizer.py
"""
Text normalization helpers for book-name matching.

Book aliases arrive in any case and with or without accents ("João",
"joao", "JOAO"). Two views of the same folding are needed:

- normalize(): canonical key used to look an alias up in the dataset
- fold_diacritics_for_pattern(): rewrites a regex so it matches the accented
  and unaccented spellings alike
"""

import re
import unicodedata

# Latin letters with accents (Latin-1 Supplement + Latin Extended-A)
_ACCENTED_RANGE = range(0x00C0, 0x0180)


def strip_diacritics(s: str) -> str:
    """Remove combining marks: "Gênesis" -> "Genesis"."""
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize(s: str) -> str:
    """
    Canonical form of a book alias.

    Case-folds, strips diacritics and collapses whitespace runs.

    Args:
        s: Any string (may be empty)

    Returns:
        Canonical key, e.g. "1  JOÃO" -> "1 joao"
    """
    key = strip_diacritics(s).casefold()
    return re.sub(r"\s+", " ", key).strip()


def escape_for_pattern(s: str) -> str:
    """Escape characters with special meaning in a regular expression."""
    return re.escape(s)


def _build_fold_classes() -> dict:
    variants = {}
    for code in _ACCENTED_RANGE:
        ch = chr(code)
        base = strip_diacritics(ch)
        if len(base) != 1 or not base.isascii() or not base.isalpha() or base == ch:
            continue
        lowered = ch.lower()
        if len(lowered) != 1:  # "İ" lowers to two code points
            continue
        variants.setdefault(base.lower(), set()).add(lowered)
    return {
        base: "[" + base + "".join(sorted(chars)) + "]"
        for base, chars in variants.items()
    }


# base letter -> character class, e.g. "c" -> "[cçćĉċč]"
FOLD_CLASSES = _build_fold_classes()


def fold_diacritics_for_pattern(pattern: str) -> str:
    """
    Make a pattern accent-insensitive.

    Every foldable letter outside an escape sequence or character class is
    replaced by a class holding the base letter and all of its accented
    variants. Letters that already carry an accent are folded to the base
    letter first, so "João" and "Joao" produce the same pattern.

    Meant for literal alternations built with escape_for_pattern(); group
    syntax such as "(?P<name>" would have its letters rewritten too.
    Case is left alone; compile the result with re.IGNORECASE.
    """
    out = []
    in_class = False
    escaped = False

    for ch in pattern:
        if escaped:
            out.append(ch)
            escaped = False
            continue
        if ch == "\\":
            out.append(ch)
            escaped = True
            continue
        if in_class:
            out.append(ch)
            if ch == "]":
                in_class = False
            continue
        if ch == "[":
            out.append(ch)
            in_class = True
            continue

        base = strip_diacritics(ch).lower()
        out.append(FOLD_CLASSES.get(base, ch) if len(base) == 1 else ch)

    return "".join(out)
