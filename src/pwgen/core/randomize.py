from pwgen.core.errors import EmptyPoolError
from pwgen.core.pool import ActivePool
from pwgen.core.random_source import BoundedSource, sample_below

TERMINATOR = 0


def randomize_into(
    buffer: bytearray,
    length: int,
    pool: ActivePool,
    source: BoundedSource,
) -> bytearray:
    """Overwrite ``buffer[:length]`` with pool draws and terminate it.

    ``buffer`` needs room for ``length + 1`` bytes. Each position draws
    independently, so characters appear in proportion to their multiplicity
    in the pool.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if len(buffer) < length + 1:
        raise ValueError(
            f"buffer holds {len(buffer)} bytes, need at least {length + 1}"
        )
    if pool.count == 0:
        raise EmptyPoolError()
    for i in range(length):
        buffer[i] = pool[sample_below(source, pool.count)]
    buffer[length] = TERMINATOR
    return buffer


def randomize(length: int, pool: ActivePool, source: BoundedSource) -> bytes:
    buffer = bytearray(length + 1)
    randomize_into(buffer, length, pool, source)
    return bytes(buffer[:length])
