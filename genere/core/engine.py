# genere/core/engine.py
"""
Recursive instantiation engine.

Resolving a symbol:
  1. reuse the run's value if the symbol was already resolved;
  2. reject symbols already on the recursion stack (cycles);
  3. draw a candidate fragment;
  4. extract its inline gender marker (`[m]`, `[f]`, `[n]`);
  5. splice fresh draws `{{other}}`, then memoized references `{other}`;
  6. rewrite median-point forms, then slash forms, using the gender of the
     declared dependency (or of an inline `[dependency]` override);
  7. store the sealed content and the symbol's own gender.

Errors raised anywhere abort the whole run.
"""

import re
from typing import Mapping, Optional, Tuple

from genere.core.domain import escaping
from genere.core.domain.context import RunContext
from genere.core.domain.exceptions import (
    CyclicDependencyError,
    MultipleGenderMarkersError,
    UnknownSymbolError,
    UnresolvableDependencyGenderError,
)
from genere.core.domain.gender_forms import rewrite_median_forms, rewrite_slash_forms
from genere.core.domain.models import Gender, ResolvedValue
from genere.core.domain.symbol_table import SymbolTable
from genere.core.ports.randomness import RandomSource
from genere.shared.logging_config import get_logger

logger = get_logger(__name__)

FRESH_REFERENCE = re.compile(r"\{\{(\w*)\}\}")
REFERENCE = re.compile(r"\{(\w*)\}")
GENDER_MARKER = re.compile(r"\[([mfn])\]", re.IGNORECASE)


class InstantiationEngine:
    """
    Resolves symbols of a SymbolTable into text.

    `preset` holds values fixed before any run (forced genders); each run and
    each fresh draw starts its memo from a copy of it.
    """

    def __init__(self, table: SymbolTable, preset: Optional[Mapping[str, ResolvedValue]] = None):
        self.table = table
        self.preset: Mapping[str, ResolvedValue] = preset if preset is not None else {}

    def run(self, symbol: str, rng: RandomSource) -> str:
        """Resolve `symbol` in a new run and return the decoded text."""
        context = RunContext.start(rng, self.preset)
        return escaping.decode(self.resolve(symbol, context))

    def resolve(self, symbol: str, context: RunContext) -> str:
        known = context.values.get(symbol)
        if known is not None:
            return known.content

        if symbol in context.stack:
            raise CyclicDependencyError(escaping.decode(symbol))
        context.stack.add(symbol)

        try:
            rule = self.table.lookup(symbol)
            if rule is None:
                raise UnknownSymbolError(escaping.decode(symbol))

            fragment = context.rng.choice(rule.candidates)
            text, gender = self._extract_gender(symbol, fragment)

            text = FRESH_REFERENCE.sub(
                lambda m: self.resolve(m.group(1), context.fork(self.preset)), text
            )
            text = REFERENCE.sub(lambda m: self.resolve(m.group(1), context), text)

            def lookup(dependency: str) -> Gender:
                return self.gender_of(symbol, dependency, context)

            if rule.gender_dependency is not None:
                gender_adapt = lookup(rule.gender_dependency)
            else:
                gender_adapt = Gender.NEUTRAL

            text = rewrite_median_forms(text, gender_adapt, lookup)
            text = rewrite_slash_forms(text, gender_adapt, lookup)

            value = ResolvedValue(content=escaping.seal(text), gender=gender)
            context.values[symbol] = value
        finally:
            context.stack.discard(symbol)

        logger.debug("symbol_resolved", symbol=symbol, gender=gender.value)
        return value.content

    def gender_of(self, dependent: str, dependency: str, context: RunContext) -> Gender:
        """Gender of `dependency`, resolving it on demand."""
        if dependency not in context.values:
            if dependency not in self.table:
                raise UnresolvableDependencyGenderError(
                    escaping.decode(dependent), escaping.decode(dependency)
                )
            self.resolve(dependency, context)
        return context.values[dependency].gender

    @staticmethod
    def _extract_gender(symbol: str, fragment: str) -> Tuple[str, Gender]:
        markers = GENDER_MARKER.findall(fragment)
        if not markers:
            return fragment, Gender.NEUTRAL
        if len(markers) > 1:
            raise MultipleGenderMarkersError(escaping.decode(symbol), escaping.decode(fragment))

        gender = Gender.parse(
            markers[0],
            symbol=escaping.decode(symbol),
            fragment=escaping.decode(fragment),
        )
        return GENDER_MARKER.sub("", fragment), gender
