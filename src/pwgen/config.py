from pathlib import Path

from pydantic import BaseModel, Field

from pwgen.core.pool import LiteralToken, PoolToken, SelectorToken
from pwgen.core.seed import DEFAULT_SEED_FILE

DEFAULT_COUNT = 1
DEFAULT_LENGTH = 8


class GeneratorConfig(BaseModel):
    tokens: list[PoolToken] = Field(
        default_factory=list,
        description="Selectors and literals, folded into the pool in order",
    )
    count: int = Field(default=DEFAULT_COUNT, ge=0)
    length: int = Field(default=DEFAULT_LENGTH, ge=0)
    seed_file: Path = Field(default=DEFAULT_SEED_FILE)

    @classmethod
    def from_arguments(
        cls,
        selectors: list[str],
        literals: list[bytes],
        **kwargs,
    ) -> "GeneratorConfig":
        """Selectors come first, then literals, as on the command line."""
        tokens: list[SelectorToken | LiteralToken] = [
            SelectorToken(name=name) for name in selectors
        ]
        tokens.extend(LiteralToken(characters=lit) for lit in literals)
        return cls(tokens=tokens, **kwargs)
