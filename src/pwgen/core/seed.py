"""Seed acquisition from a system randomness device."""

import logging
import time
from pathlib import Path

from pydantic import BaseModel, Field

_LOGGER = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path("/dev/urandom")
SEED_BYTES = 4
SEED_MASK = (1 << (8 * SEED_BYTES)) - 1

FALLBACK_WARNINGS = (
    "WARNING: fallback: using system time as random seed",
    "WARNING: system time is predictable!",
)


class SeedResult(BaseModel):
    seed: int = Field(ge=0, le=SEED_MASK, description="Unsigned 32-bit seed")
    source: str = Field(description="File the seed was read from")
    fallback: bool = Field(
        default=False, description="True if the seed came from the clock"
    )
    reason: str | None = Field(
        default=None, description="Why the seed file could not be used"
    )


def _time_seed() -> int:
    return int(time.time()) & SEED_MASK


def read_seed(path: Path | str = DEFAULT_SEED_FILE) -> SeedResult:
    """Read a 4-byte little-endian seed from ``path``.

    An unreadable or short file is not an error: the result falls back to a
    time-based seed and carries ``fallback=True`` with the reason.
    """
    source = str(path)
    try:
        with open(path, "rb") as handle:
            data = handle.read(SEED_BYTES)
    except OSError as exc:
        reason = exc.strerror or str(exc)
    else:
        if len(data) == SEED_BYTES:
            _LOGGER.debug("read seed from %s", source)
            return SeedResult(
                seed=int.from_bytes(data, "little"), source=source
            )
        reason = f"short read ({len(data)} of {SEED_BYTES} bytes)"

    _LOGGER.debug("%s: %s; falling back to a time-based seed", source, reason)
    return SeedResult(
        seed=_time_seed(), source=source, fallback=True, reason=reason
    )
