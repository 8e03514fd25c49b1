# genere/core/domain/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from genere.core.domain.exceptions import InvalidGenderMarkerError

# --- Enums ---

class Gender(str, Enum):
    """
    Grammatical gender carried by a resolved symbol.

    NEUTRAL doubles as "no gender information": a symbol that never declares
    a gender is neutral.
    """
    MALE = "m"
    FEMALE = "f"
    NEUTRAL = "n"

    @classmethod
    def parse(
        cls,
        value: str,
        symbol: Optional[str] = None,
        fragment: Optional[str] = None,
    ) -> "Gender":
        """Parse a marker value ('m', 'F', ...) into a Gender."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidGenderMarkerError(value, symbol=symbol, fragment=fragment) from None

# --- Entities ---

@dataclass(frozen=True)
class ReplacementRule:
    """
    Everything the table knows about one symbol.

    Attributes:
        candidates:
            Escaped fragments; one is drawn uniformly per instantiation.
        gender_dependency:
            Name of the symbol whose gender governs this symbol's gender
            forms, when it was declared as `name[dependency]`.
    """
    candidates: Tuple[str, ...]
    gender_dependency: Optional[str] = None

@dataclass(frozen=True)
class ResolvedValue:
    """The text and gender a symbol settled on within one run."""
    content: str
    gender: Gender = Gender.NEUTRAL
