# genere/generator.py
"""
Public entry point.

    from genere import Generator

    gen = Generator()
    gen.load_json('''
    {
        "hero": ["John[m]", "Joan[f]"],
        "job[hero]": ["wizard/witch"],
        "main[hero]": ["{hero}. He/She is a {job}."]
    }''')
    gen.instantiate("main")   # "John. He is a wizard." or "Joan. She is a witch."
"""

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from genere.adapters.json_table import parse_table, read_table
from genere.core.domain import escaping
from genere.core.domain.exceptions import DomainError
from genere.core.domain.models import Gender, ResolvedValue
from genere.core.domain.symbol_table import SymbolTable
from genere.core.engine import InstantiationEngine
from genere.core.ports.randomness import create_random_source
from genere.shared.logging_config import get_logger
from genere.shared.observability import get_tracer

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class Generator:
    """
    A table of symbols plus the genders forced on some of them.

    Responsibilities:
    1. Owns the SymbolTable (`define`, `load_json`, `load_file`).
    2. Keeps pre-seeded genders across runs (`force_gender`, `reset_gender`).
    3. Runs the InstantiationEngine, randomly or from a seed.
    """

    def __init__(self) -> None:
        self._table = SymbolTable()
        self._preset: Dict[str, ResolvedValue] = {}
        self._engine = InstantiationEngine(self._table, self._preset)

    # --- Table -------------------------------------------------------------

    def define(self, name: str, candidates: Iterable[str]) -> None:
        """
        Add (or replace) a symbol.

        `name` may declare a gender dependency: `job[hero]` adapts the gender
        forms of its candidates to the gender of `hero`.
        """
        symbol = self._table.define(name, candidates)
        logger.debug("symbol_defined", symbol=escaping.decode(symbol))

    def define_many(self, table: Mapping[str, Iterable[str]]) -> None:
        for name, candidates in table.items():
            self.define(name, candidates)

    def load_json(self, raw: Union[str, bytes]) -> None:
        """Define every symbol of a JSON table. Nothing is defined if it is malformed."""
        table = parse_table(raw)
        self.define_many(table)
        logger.info("table_loaded", symbols=len(table), defined=len(self._table))

    def load_file(self, path: Union[str, Path], encoding: Optional[str] = None) -> None:
        self.define_many(read_table(path, encoding=encoding))

    def symbols(self) -> List[str]:
        return sorted(escaping.decode(name) for name in self._table)

    # --- Forced genders ----------------------------------------------------

    def force_gender(self, name: str, gender: Union[Gender, str]) -> None:
        """
        Fix the gender of `name` for every future run.

        The symbol then resolves to an empty string; its use is to govern
        the gender forms of the symbols depending on it.
        """
        if not isinstance(gender, Gender):
            gender = Gender.parse(gender, symbol=name)
        self._preset[escaping.encode(name)] = ResolvedValue(content="", gender=gender)

    def reset_gender(self, name: Optional[str] = None) -> None:
        """Forget the gender forced on `name`, or on every symbol."""
        if name is None:
            self._preset.clear()
        else:
            self._preset.pop(escaping.encode(name), None)

    # --- Instantiation -----------------------------------------------------

    def instantiate(self, symbol: str, seed: Optional[int] = None) -> str:
        """
        Generate a text for `symbol`.

        Random unless `seed` is given; the same seed on an unchanged table
        always gives the same text.
        """
        with tracer.start_as_current_span("generator.instantiate") as span:
            span.set_attribute("genere.symbol", symbol)
            if seed is not None:
                span.set_attribute("genere.seed", seed)

            logger.debug("instantiation_started", symbol=symbol, seed=seed)
            try:
                text = self._engine.run(escaping.encode(symbol), create_random_source(seed))
            except DomainError as e:
                logger.warning(
                    "instantiation_failed",
                    symbol=symbol,
                    error=type(e).__name__,
                    reason=e.message,
                )
                raise

            span.set_attribute("genere.generated_length", len(text))
            return text

    def instantiate_with_seed(self, symbol: str, seed: int) -> str:
        """Deterministic variant of `instantiate`."""
        return self.instantiate(symbol, seed=seed)
