"""Symbol catalog, active pool, and unbiased sampling."""

from pwgen.core.errors import (
    EmptyPoolError,
    PoolGrowthError,
    PoolTooLargeError,
    PwgenError,
    UnknownSymbolSetError,
)
from pwgen.core.pool import (
    ActivePool,
    LiteralToken,
    SelectorToken,
    assemble_pool,
)
from pwgen.core.random_source import SeededSource, sample_below
from pwgen.core.randomize import randomize, randomize_into
from pwgen.core.seed import SeedResult, read_seed
from pwgen.core.symbols import (
    SymbolCatalog,
    SymbolSet,
    build_symbol_catalog,
    fill_ascii_range,
)

__all__ = [
    "ActivePool",
    "EmptyPoolError",
    "LiteralToken",
    "PoolGrowthError",
    "PoolTooLargeError",
    "PwgenError",
    "SeedResult",
    "SeededSource",
    "SelectorToken",
    "SymbolCatalog",
    "SymbolSet",
    "UnknownSymbolSetError",
    "assemble_pool",
    "build_symbol_catalog",
    "fill_ascii_range",
    "randomize",
    "randomize_into",
    "read_seed",
    "sample_below",
]
