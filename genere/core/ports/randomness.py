# genere/core/ports/randomness.py
import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """
    Port for the randomness the engine consumes.

    One source is threaded through a whole instantiation, nested fresh
    draws included, so a seed fixes the entire output. `random.Random`
    satisfies this protocol.
    """

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly."""
        ...


def create_random_source(seed: Optional[int] = None) -> RandomSource:
    """
    Build a source: seeded and reproducible when `seed` is given,
    seeded from OS entropy otherwise.
    """
    if seed is None:
        return random.Random()
    return random.Random(seed)
