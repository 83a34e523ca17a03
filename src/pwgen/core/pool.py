"""Active symbol pool: the multiset of characters strings are drawn from."""

import logging
from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from pwgen.core.errors import (
    EmptyPoolError,
    PoolGrowthError,
    UnknownSymbolSetError,
)
from pwgen.core.symbols import DEFAULT_SYMBOL_SET, SymbolCatalog

_LOGGER = logging.getLogger(__name__)


class SelectorToken(BaseModel):
    kind: Literal["selector"] = "selector"
    name: str = Field(description="Symbol set name, e.g. 'num'")


class LiteralToken(BaseModel):
    kind: Literal["literal"] = "literal"
    characters: bytes = Field(description="Raw bytes added to the pool")


PoolToken = Annotated[
    SelectorToken | LiteralToken, Field(discriminator="kind")
]


class ActivePool:
    """Growable byte pool.

    Duplicate characters are kept: a character present twice is drawn twice
    as often.
    """

    def __init__(self) -> None:
        self._characters = bytearray()

    @property
    def characters(self) -> bytes:
        return bytes(self._characters)

    @property
    def count(self) -> int:
        return len(self._characters)

    def __len__(self) -> int:
        return len(self._characters)

    def __getitem__(self, index: int) -> int:
        return self._characters[index]

    def activate(self, characters: bytes) -> int:
        """Append ``characters`` and return how many were added.

        Raises PoolGrowthError if the storage cannot grow; the pool is
        released first, so a partially grown pool is never observable.
        """
        try:
            self._characters.extend(characters)
        except MemoryError as exc:
            requested = self.count + len(characters)
            self._characters = bytearray()
            raise PoolGrowthError(requested) from exc
        _LOGGER.debug(
            "activated %d characters, pool length %d",
            len(characters),
            self.count,
        )
        return len(characters)

    def ensure_default(self, catalog: SymbolCatalog) -> bool:
        """Fill an empty pool from the default set. Returns True if applied."""
        if self.count:
            return False
        entry = catalog.find(DEFAULT_SYMBOL_SET)
        if entry is None:
            raise UnknownSymbolSetError(DEFAULT_SYMBOL_SET)
        self.activate(entry.characters)
        _LOGGER.debug("no symbols selected, using %s", DEFAULT_SYMBOL_SET)
        return True

    def require_nonempty(self) -> None:
        if not self._characters:
            raise EmptyPoolError()


def assemble_pool(
    catalog: SymbolCatalog, tokens: Iterable[PoolToken] = ()
) -> ActivePool:
    """Build the pool from tokens in order, falling back to the default set.

    Raises UnknownSymbolSetError for a selector naming no catalog entry.
    """
    pool = ActivePool()
    for token in tokens:
        if isinstance(token, SelectorToken):
            entry = catalog.find(token.name)
            if entry is None:
                raise UnknownSymbolSetError(token.name)
            pool.activate(entry.characters)
        else:
            pool.activate(token.characters)
    pool.ensure_default(catalog)
    pool.require_nonempty()
    return pool
