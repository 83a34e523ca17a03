"""Configuration-to-output pipeline."""

import logging
from collections.abc import Iterable, Iterator

from pwgen.config import GeneratorConfig
from pwgen.core.errors import PoolTooLargeError
from pwgen.core.pool import ActivePool, PoolToken, assemble_pool
from pwgen.core.random_source import BoundedSource, SeededSource
from pwgen.core.randomize import randomize
from pwgen.core.seed import SeedResult, read_seed
from pwgen.core.symbols import build_symbol_catalog

logger = logging.getLogger(__name__)


def build_pool(tokens: Iterable[PoolToken]) -> ActivePool:
    """Assemble the pool; the catalog only lives for the duration."""
    catalog = build_symbol_catalog()
    try:
        pool = assemble_pool(catalog, tokens)
    finally:
        catalog.clear()
    logger.debug("active pool: %d characters", pool.count)
    return pool


def generate_strings(
    pool: ActivePool, count: int, length: int, source: BoundedSource
) -> Iterator[bytes]:
    limit = source.max_value + 1
    if pool.count > limit:
        raise PoolTooLargeError(pool.count, limit)
    for _ in range(count):
        yield randomize(length, pool, source)


def generate_from_config(
    config: GeneratorConfig, seed: SeedResult | None = None
) -> Iterator[bytes]:
    pool = build_pool(config.tokens)
    if seed is None:
        seed = read_seed(config.seed_file)
    yield from generate_strings(
        pool, config.count, config.length, SeededSource(seed.seed)
    )
