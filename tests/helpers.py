from collections.abc import Iterable, Sequence


class ScriptedSource:
    """Bounded source replaying fixed draws, for exact sampler checks."""

    def __init__(self, max_value: int, draws: Iterable[int]):
        self.max_value = max_value
        self._draws = iter(draws)
        self.calls = 0

    def raw(self) -> int:
        self.calls += 1
        value = next(self._draws)
        assert 0 <= value <= self.max_value
        return value


def chi_squared(counts: Sequence[int]) -> float:
    total = sum(counts)
    expected = total / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts)
