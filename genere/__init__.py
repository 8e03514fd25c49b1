"""
genere - random text generation with grammatical gender agreement.

Symbols map to candidate fragments; fragments reference other symbols
(`{hero}`, `{{hero}}`), declare their own gender (`[m]`, `[f]`, `[n]`) and
write gendered words as `He/She` or `un·e`, resolved from another symbol's
gender.
"""

from genere.core.domain.exceptions import (
    CyclicDependencyError,
    DomainError,
    EmptyCandidatesError,
    InvalidGenderMarkerError,
    MalformedSourceTableError,
    MalformedSymbolNameError,
    MultipleGenderMarkersError,
    UnknownSymbolError,
    UnresolvableDependencyGenderError,
)
from genere.core.domain.models import Gender
from genere.generator import Generator

__version__ = "0.2.0"

__all__ = [
    "Generator",
    "Gender",
    "DomainError",
    "UnknownSymbolError",
    "CyclicDependencyError",
    "MultipleGenderMarkersError",
    "InvalidGenderMarkerError",
    "UnresolvableDependencyGenderError",
    "MalformedSymbolNameError",
    "EmptyCandidatesError",
    "MalformedSourceTableError",
]
