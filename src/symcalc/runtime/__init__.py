from .core import Env, RuntimeContext
from .errors import CyclicDefinition, DivisionByZero, ResolutionError, UndefinedName
from .renderer import render
from .resolver import resolve, resolve_initial

__all__ = [
    "CyclicDefinition",
    "DivisionByZero",
    "Env",
    "ResolutionError",
    "RuntimeContext",
    "UndefinedName",
    "render",
    "resolve",
    "resolve_initial",
]
