# genere/core/domain/context.py
from dataclasses import dataclass, field
from typing import Dict, Mapping, Set

from genere.core.domain.models import ResolvedValue
from genere.core.ports.randomness import RandomSource


@dataclass
class RunContext:
    """
    State of one instantiation run.

    Fields:
      - values: symbol -> ResolvedValue, memoized for the whole run.
      - stack: symbols whose resolution is in progress (cycle detection).
      - rng: the single randomness source of the run.
    """
    rng: RandomSource
    values: Dict[str, ResolvedValue] = field(default_factory=dict)
    stack: Set[str] = field(default_factory=set)

    @classmethod
    def start(cls, rng: RandomSource, preset: Mapping[str, ResolvedValue]) -> "RunContext":
        """Open a run whose memo starts from the pre-seeded values."""
        return cls(rng=rng, values=dict(preset))

    def fork(self, preset: Mapping[str, ResolvedValue]) -> "RunContext":
        """
        Context for a fresh draw (`{{symbol}}`).

        The memo restarts from the pre-seeded values; the randomness source
        and the recursion stack are shared with this run.
        """
        return RunContext(rng=self.rng, values=dict(preset), stack=self.stack)
