from dataclasses import dataclass

from ..frontend.ast_expressions import Expression


class ResolutionError(Exception):
    """An expression could not be reduced to an integer."""


@dataclass
class UndefinedName(ResolutionError):
    name: str

    def __str__(self) -> str:
        return f"Identifier `{self.name}` not defined"


@dataclass
class DivisionByZero(ResolutionError):
    dividend: int

    def __str__(self) -> str:
        return f"Tried to divide {self.dividend} by zero"


@dataclass
class CyclicDefinition(ResolutionError):
    name: str
    # snapshot of the offending binding, for diagnostics only
    expression: Expression | None = None

    def __str__(self) -> str:
        if self.expression is None:
            return f"Identifier `{self.name}` is defined recursively"
        return f"Identifier `{self.name}` is defined recursively as `{self.expression}`"
