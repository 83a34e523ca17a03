"""Predefined symbol sets, built from ASCII ranges and from each other."""

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

_LOGGER = logging.getLogger(__name__)

ASCII_PRINTABLE = "asciip"
ASCII_PRINTABLE_NO_SPACE = "asciipns"
DIGITS = "num"
UPPERCASE = "ALPHA"
LOWERCASE = "alpha"
LETTERS = "Alpha"
UPPERCASE_ALNUM = "ALNUM"
LOWERCASE_ALNUM = "alnum"
ALNUM = "Alnum"
PUNCTUATION = "punct"

DEFAULT_SYMBOL_SET = ASCII_PRINTABLE_NO_SPACE

_PUNCTUATION_RANGES = (
    (ord("!"), ord("/")),
    (ord(":"), ord("@")),
    (ord("["), ord("`")),
    (ord("{"), ord("~")),
)


def fill_ascii_range(first: int, last: int) -> bytes:
    """Return the bytes ``first..last`` inclusive.

    Raises ValueError when ``first > last`` or either bound is not a byte.
    """
    if not (0 <= first <= 0xFF and 0 <= last <= 0xFF):
        raise ValueError(
            f"range bounds must be byte values, got ({first}, {last})"
        )
    if first > last:
        raise ValueError(
            f"range is malformed: first ({first}) must be <= last ({last})"
        )
    return bytes(range(first, last + 1))


class SymbolSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Lookup key, e.g. 'num'")
    characters: bytes = Field(description="Candidate characters, in order")
    count: int = Field(ge=0, description="Number of characters")

    @model_validator(mode="after")
    def validate_count(self) -> "SymbolSet":
        if self.count != len(self.characters):
            raise ValueError(
                f"count ({self.count}) must equal the number of characters "
                f"({len(self.characters)})"
            )
        if b"\x00" in self.characters:
            raise ValueError("characters must not contain a NUL byte")
        return self

    @classmethod
    def from_bytes(cls, name: str, characters: bytes) -> "SymbolSet":
        return cls(name=name, characters=characters, count=len(characters))

    def text(self) -> str:
        return self.characters.decode("ascii", errors="backslashreplace")


class SymbolCatalog:
    """Insertion-ordered collection of symbol sets, looked up by name."""

    def __init__(self) -> None:
        self._entries: list[SymbolSet] = []

    def __iter__(self) -> Iterator[SymbolSet]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None if isinstance(name, str) else False

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def add(self, name: str, characters: bytes) -> SymbolSet:
        entry = SymbolSet.from_bytes(name, characters)
        self._entries.append(entry)
        _LOGGER.debug("symbol set %s = {%s}", name, entry.text())
        return entry

    def find(self, name: str, start: int = 0) -> SymbolSet | None:
        """Return the first entry named ``name`` at or after ``start``."""
        for entry in self._entries[start:]:
            if entry.name == name:
                return entry
        return None

    def concat(self, name: str, *parts: str) -> SymbolSet:
        """Add a set made of the named sets' characters, copied in order."""
        chunks: list[bytes] = []
        for part in parts:
            entry = self.find(part)
            if entry is None:
                raise KeyError(f"cannot compose {name!r}: no set {part!r}")
            chunks.append(entry.characters)
        return self.add(name, b"".join(chunks))

    def clear(self) -> None:
        self._entries.clear()


def build_symbol_catalog() -> SymbolCatalog:
    catalog = SymbolCatalog()
    catalog.add(ASCII_PRINTABLE, fill_ascii_range(ord(" "), ord("~")))
    catalog.add(ASCII_PRINTABLE_NO_SPACE, fill_ascii_range(ord("!"), ord("~")))
    catalog.add(DIGITS, fill_ascii_range(ord("0"), ord("9")))
    catalog.add(UPPERCASE, fill_ascii_range(ord("A"), ord("Z")))
    catalog.add(LOWERCASE, fill_ascii_range(ord("a"), ord("z")))

    catalog.concat(LETTERS, UPPERCASE, LOWERCASE)
    catalog.concat(UPPERCASE_ALNUM, UPPERCASE, DIGITS)
    catalog.concat(LOWERCASE_ALNUM, LOWERCASE, DIGITS)
    catalog.concat(ALNUM, LETTERS, DIGITS)

    catalog.add(
        PUNCTUATION,
        b"".join(fill_ascii_range(lo, hi) for lo, hi in _PUNCTUATION_RANGES),
    )
    return catalog
