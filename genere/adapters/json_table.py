# genere/adapters/json_table.py
"""
JSON source tables.

A table is a JSON object mapping symbol names to arrays of candidate
strings:

    {
        "hero": ["John[m]", "Joan[f]"],
        "job[hero]": ["wizard/witch"],
        "main[hero]": ["{hero}. He/She is a {job}."]
    }
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from genere.core.domain.exceptions import MalformedSourceTableError
from genere.shared.config import settings
from genere.shared.logging_config import get_logger

logger = get_logger(__name__)

SourceTable = Dict[str, List[str]]

_TABLE_ADAPTER = TypeAdapter(SourceTable)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{first['msg']} at '{location}'"
    return first["msg"]


def parse_table(raw: Union[str, bytes]) -> SourceTable:
    """
    Validate a JSON document and return it as a name -> candidates mapping.

    Key order is preserved. Raises MalformedSourceTableError on invalid JSON
    or on any value that is not a list of strings.
    """
    try:
        return _TABLE_ADAPTER.validate_json(raw, strict=True)
    except ValidationError as exc:
        raise MalformedSourceTableError(_describe(exc)) from exc


def read_table(path: Union[str, Path], encoding: Optional[str] = None) -> SourceTable:
    """Read and validate a JSON table file."""
    path = Path(path)
    raw = path.read_text(encoding=encoding or settings.TABLE_ENCODING)
    table = parse_table(raw)
    logger.info("table_read", path=str(path), symbols=len(table))
    return table
