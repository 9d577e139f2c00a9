# bible_refs/services/references/book_data.py
"""
Canonical book metadata for reference resolution.

One CanonicalBook per book of the 66-book canon, keyed by the abbreviation
the Bible API uses in its paths (e.g. "gn", "jo", "1co"). Display names are
Portuguese, matching the API's default versions; aliases cover Portuguese
(with and without accents, older spellings) and English names, plus Roman
numeral forms for numbered books.

Three aligned tables are derived from BOOKS:
- BOOKS_BY_NAME: alias -> abbreviation (declaration order)
- BOOKS_BY_ABBREV: abbreviation -> display name
- BOOK_CHAPTERS: abbreviation -> chapter count
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .text_normalizer import normalize


@dataclass(frozen=True)
class CanonicalBook:
    """
    A book of the canon.

    Attributes:
        abbreviation: Stable identifier, used in API paths
        name: Display name
        chapters: Number of chapters (>= 1)
        aliases: Every spelling that should match this book
    """
    abbreviation: str
    name: str
    chapters: int
    aliases: tuple


BOOKS = (
    # Pentateuco
    CanonicalBook("gn", "Gênesis", 50, ("Gênesis", "Genesis")),
    CanonicalBook("ex", "Êxodo", 40, ("Êxodo", "Exodus")),
    CanonicalBook("lv", "Levítico", 27, ("Levítico", "Leviticus")),
    CanonicalBook("nm", "Números", 36, ("Números", "Numbers")),
    CanonicalBook("dt", "Deuteronômio", 34, ("Deuteronômio", "Deuteronómio", "Deuteronomy")),

    # Históricos
    CanonicalBook("js", "Josué", 24, ("Josué", "Joshua")),
    CanonicalBook("jz", "Juízes", 21, ("Juízes", "Judges")),
    CanonicalBook("rt", "Rute", 4, ("Rute", "Ruth")),
    CanonicalBook("1sm", "1 Samuel", 31, ("1 Samuel", "I Samuel", "1Samuel")),
    CanonicalBook("2sm", "2 Samuel", 24, ("2 Samuel", "II Samuel", "2Samuel")),
    CanonicalBook("1rs", "1 Reis", 22, ("1 Reis", "I Reis", "1 Kings", "I Kings")),
    CanonicalBook("2rs", "2 Reis", 25, ("2 Reis", "II Reis", "2 Kings", "II Kings")),
    CanonicalBook("1cr", "1 Crônicas", 29, ("1 Crônicas", "I Crônicas", "1 Chronicles", "I Chronicles")),
    CanonicalBook("2cr", "2 Crônicas", 36, ("2 Crônicas", "II Crônicas", "2 Chronicles", "II Chronicles")),
    CanonicalBook("ed", "Esdras", 10, ("Esdras", "Ezra")),
    CanonicalBook("ne", "Neemias", 13, ("Neemias", "Nehemiah")),
    CanonicalBook("et", "Ester", 10, ("Ester", "Esther")),

    # Poéticos
    CanonicalBook("job", "Jó", 42, ("Jó", "Job")),
    CanonicalBook("sl", "Salmos", 150, ("Salmos", "Salmo", "Psalms", "Psalm")),
    CanonicalBook("pv", "Provérbios", 31, ("Provérbios", "Proverbs")),
    CanonicalBook("ec", "Eclesiastes", 12, ("Eclesiastes", "Ecclesiastes")),
    CanonicalBook("ct", "Cânticos", 8, (
        "Cânticos", "Cântico dos Cânticos", "Cantares", "Cantares de Salomão",
        "Song of Solomon", "Song of Songs",
    )),

    # Profetas maiores
    CanonicalBook("is", "Isaías", 66, ("Isaías", "Isaiah")),
    CanonicalBook("jr", "Jeremias", 52, ("Jeremias", "Jeremiah")),
    CanonicalBook("lm", "Lamentações", 5, ("Lamentações", "Lamentações de Jeremias", "Lamentations")),
    CanonicalBook("ez", "Ezequiel", 48, ("Ezequiel", "Ezekiel")),
    CanonicalBook("dn", "Daniel", 12, ("Daniel",)),

    # Profetas menores
    CanonicalBook("os", "Oséias", 14, ("Oséias", "Oseias", "Hosea")),
    CanonicalBook("jl", "Joel", 3, ("Joel",)),
    CanonicalBook("am", "Amós", 9, ("Amós", "Amos")),
    CanonicalBook("ob", "Obadias", 1, ("Obadias", "Abdias", "Obadiah")),
    CanonicalBook("jn", "Jonas", 4, ("Jonas", "Jonah")),
    CanonicalBook("mq", "Miquéias", 7, ("Miquéias", "Miqueias", "Micah")),
    CanonicalBook("na", "Naum", 3, ("Naum", "Nahum")),
    CanonicalBook("hc", "Habacuque", 3, ("Habacuque", "Habacuc", "Habakkuk")),
    CanonicalBook("sf", "Sofonias", 3, ("Sofonias", "Zephaniah")),
    CanonicalBook("ag", "Ageu", 2, ("Ageu", "Haggai")),
    CanonicalBook("zc", "Zacarias", 14, ("Zacarias", "Zechariah")),
    CanonicalBook("ml", "Malaquias", 4, ("Malaquias", "Malachi")),

    # Evangelhos e Atos
    CanonicalBook("mt", "Mateus", 28, ("Mateus", "Matthew")),
    CanonicalBook("mc", "Marcos", 16, ("Marcos", "Mark")),
    CanonicalBook("lc", "Lucas", 24, ("Lucas", "Luke")),
    CanonicalBook("jo", "João", 21, ("João", "John")),
    CanonicalBook("at", "Atos", 28, ("Atos", "Atos dos Apóstolos", "Acts")),

    # Epístolas paulinas
    CanonicalBook("rm", "Romanos", 16, ("Romanos", "Romans")),
    CanonicalBook("1co", "1 Coríntios", 16, ("1 Coríntios", "I Coríntios", "1 Corinthians", "I Corinthians")),
    CanonicalBook("2co", "2 Coríntios", 13, ("2 Coríntios", "II Coríntios", "2 Corinthians", "II Corinthians")),
    CanonicalBook("gl", "Gálatas", 6, ("Gálatas", "Galatians")),
    CanonicalBook("ef", "Efésios", 6, ("Efésios", "Ephesians")),
    CanonicalBook("fp", "Filipenses", 4, ("Filipenses", "Philippians")),
    CanonicalBook("cl", "Colossenses", 4, ("Colossenses", "Colossians")),
    CanonicalBook("1ts", "1 Tessalonicenses", 5, (
        "1 Tessalonicenses", "I Tessalonicenses", "1 Thessalonians", "I Thessalonians",
    )),
    CanonicalBook("2ts", "2 Tessalonicenses", 3, (
        "2 Tessalonicenses", "II Tessalonicenses", "2 Thessalonians", "II Thessalonians",
    )),
    CanonicalBook("1tm", "1 Timóteo", 6, ("1 Timóteo", "I Timóteo", "1 Timothy", "I Timothy")),
    CanonicalBook("2tm", "2 Timóteo", 4, ("2 Timóteo", "II Timóteo", "2 Timothy", "II Timothy")),
    CanonicalBook("tt", "Tito", 3, ("Tito", "Titus")),
    CanonicalBook("fm", "Filemom", 1, ("Filemom", "Filemon", "Philemon")),

    # Epístolas gerais
    CanonicalBook("hb", "Hebreus", 13, ("Hebreus", "Hebrews")),
    CanonicalBook("tg", "Tiago", 5, ("Tiago", "James")),
    CanonicalBook("1pe", "1 Pedro", 5, ("1 Pedro", "I Pedro", "1 Peter", "I Peter")),
    CanonicalBook("2pe", "2 Pedro", 3, ("2 Pedro", "II Pedro", "2 Peter", "II Peter")),
    CanonicalBook("1jo", "1 João", 5, ("1 João", "I João", "1 John", "I John")),
    CanonicalBook("2jo", "2 João", 1, ("2 João", "II João", "2 John", "II John")),
    CanonicalBook("3jo", "3 João", 1, ("3 João", "III João", "3 John", "III John")),
    CanonicalBook("jd", "Judas", 1, ("Judas", "Jude")),

    # Profecia
    CanonicalBook("ap", "Apocalipse", 22, ("Apocalipse", "Revelation")),
)

BOOKS_BY_NAME = {
    alias: book.abbreviation
    for book in BOOKS
    for alias in book.aliases
}

BOOKS_BY_ABBREV = {book.abbreviation: book.name for book in BOOKS}

BOOK_CHAPTERS = {book.abbreviation: book.chapters for book in BOOKS}


class ReferenceDataset:
    """
    Read-only lookup tables built once from a sequence of books.

    Usage:
        dataset = get_dataset()
        abbrev = dataset.abbreviation_for("JOAO")   # "jo"
        dataset.display_name(abbrev)                # "João"
        dataset.chapter_count(abbrev)               # 21

    Raises:
        ValueError: If two books share an abbreviation, or two aliases of
            different books normalize to the same key
    """

    def __init__(self, books: Iterable[CanonicalBook]):
        self._books = tuple(books)

        by_abbrev = {}
        alias_keys = {}
        aliases = []

        for book in self._books:
            if book.abbreviation in by_abbrev:
                raise ValueError(f"Duplicate book abbreviation: {book.abbreviation}")
            if book.chapters < 1:
                raise ValueError(f"Book {book.abbreviation} must have at least one chapter")
            by_abbrev[book.abbreviation] = book

            for alias in book.aliases:
                key = normalize(alias)
                owner = alias_keys.get(key)
                if owner is not None and owner != book.abbreviation:
                    raise ValueError(
                        f"Alias '{alias}' of {book.abbreviation} collides with {owner}"
                    )
                if owner is None:
                    alias_keys[key] = book.abbreviation
                if alias not in aliases:
                    aliases.append(alias)

        self._by_abbrev: Mapping[str, CanonicalBook] = MappingProxyType(by_abbrev)
        self._alias_keys: Mapping[str, str] = MappingProxyType(alias_keys)
        self._aliases = tuple(aliases)

    @property
    def books(self) -> tuple:
        """Books in declaration order."""
        return self._books

    @property
    def aliases(self) -> tuple:
        """Every alias string, in declaration order."""
        return self._aliases

    def abbreviation_for(self, alias: str) -> Optional[str]:
        """Look up an alias in any case/accent form; None when unknown."""
        return self._alias_keys.get(normalize(alias))

    def get(self, abbreviation: str) -> Optional[CanonicalBook]:
        return self._by_abbrev.get(abbreviation)

    def display_name(self, abbreviation: str) -> Optional[str]:
        book = self._by_abbrev.get(abbreviation)
        return book.name if book else None

    def chapter_count(self, abbreviation: str) -> int:
        """Chapter count, or 0 for an unknown abbreviation."""
        book = self._by_abbrev.get(abbreviation)
        return book.chapters if book else 0

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, abbreviation: str) -> bool:
        return abbreviation in self._by_abbrev


@lru_cache(maxsize=1)
def get_dataset() -> ReferenceDataset:
    """Return the shared dataset built from BOOKS."""
    return ReferenceDataset(BOOKS)
