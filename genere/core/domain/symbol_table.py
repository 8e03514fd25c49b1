# genere/core/domain/symbol_table.py
import re
from typing import Dict, Iterable, Iterator, Optional, Tuple

from genere.core.domain import escaping
from genere.core.domain.exceptions import EmptyCandidatesError, MalformedSymbolNameError
from genere.core.domain.models import ReplacementRule

_DEPENDENCY_SUFFIX = re.compile(r"(.*)\[(\w+)\]", re.DOTALL)


def parse_symbol_name(raw_name: str) -> Tuple[str, Optional[str]]:
    """
    Split an escaped symbol name into (name, dependency).

    `job[hero]` -> ("job", "hero"), `job` -> ("job", None). Escaped
    brackets are sentinels at this point, so any raw bracket left after the
    suffix is stripped, or an empty name, means the name is malformed.
    """
    match = _DEPENDENCY_SUFFIX.fullmatch(raw_name)
    if match:
        name, dependency = match.group(1), match.group(2)
    else:
        name, dependency = raw_name, None

    if not name or "[" in name or "]" in name:
        raise MalformedSymbolNameError(escaping.decode(raw_name))
    return name, dependency


class SymbolTable:
    """
    Symbol name -> ReplacementRule.

    Names and fragments are stored escaped. Redefining a symbol replaces its
    previous rule.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, ReplacementRule] = {}

    def define(self, raw_name: str, raw_candidates: Iterable[str]) -> str:
        """Store the rule for `raw_name` and return the bare (escaped) symbol name."""
        name, dependency = parse_symbol_name(escaping.encode(raw_name))
        candidates = tuple(escaping.encode(c) for c in raw_candidates)
        if not candidates:
            raise EmptyCandidatesError(escaping.decode(name))

        self._rules[name] = ReplacementRule(
            candidates=candidates,
            gender_dependency=dependency,
        )
        return name

    def lookup(self, name: str) -> Optional[ReplacementRule]:
        return self._rules.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
