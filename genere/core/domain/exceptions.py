# genere/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Lookup Errors ---

class UnknownSymbolError(DomainError):
    """Raised when a symbol is referenced but no rule was defined for it."""
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Could not find symbol '{symbol}' in generator.")

class UnresolvableDependencyGenderError(DomainError):
    """Raised when a symbol needs the gender of a symbol that cannot provide one."""
    def __init__(self, dependent: str, dependency: str):
        self.dependent = dependent
        self.dependency = dependency
        super().__init__(
            f"Symbol '{dependent}' needs a gender from '{dependency}', "
            f"but '{dependency}' is neither defined nor assigned a gender."
        )

# --- Resolution Errors ---

class CyclicDependencyError(DomainError):
    """Raised when resolving a symbol requires resolving that same symbol again."""
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"Can not instantiate, there is a cyclic dependency: '{symbol}' depends on itself."
        )

class MultipleGenderMarkersError(DomainError):
    """Raised when a single fragment declares its own gender more than once."""
    def __init__(self, symbol: str, fragment: str):
        self.symbol = symbol
        self.fragment = fragment
        super().__init__(f"Multiple genders for symbol '{symbol}' in expression '{fragment}'.")

class InvalidGenderMarkerError(DomainError):
    """Raised when a gender marker is not one of 'm', 'f' or 'n'."""
    def __init__(self, value: str, symbol: Optional[str] = None, fragment: Optional[str] = None):
        self.value = value
        self.symbol = symbol
        self.fragment = fragment
        where = ""
        if symbol is not None:
            where = f" for symbol '{symbol}'"
            if fragment is not None:
                where += f" in expression '{fragment}'"
        super().__init__(f"Invalid gender '{value}'{where}: expected 'm', 'f' or 'n'.")

# --- Definition Errors ---

class MalformedSymbolNameError(DomainError):
    """Raised when a symbol name carries a badly formed '[dependency]' suffix."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Malformed symbol name '{name}': a dependency must be written as "
            f"'name[dependency]' with a word-character dependency."
        )

class EmptyCandidatesError(DomainError):
    """Raised when a symbol is defined without any candidate fragment."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol '{name}' must have at least one candidate.")

class MalformedSourceTableError(DomainError):
    """Raised when a structured source table (e.g. JSON) cannot be turned into rules."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed source table: {reason}")
