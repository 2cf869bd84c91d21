from dataclasses import dataclass
from enum import Enum

from .ast_expressions import Expression


class RenderMode(Enum):
    EAGER = "eager"
    LAZY = "lazy"
    MIXED = "mixed"


@dataclass(slots=True)
class Assign:
    name: str
    expression: Expression


@dataclass(slots=True)
class Print:
    expression: Expression


@dataclass(slots=True)
class Render:
    mode: RenderMode
    expression: Expression


Statement = Assign | Print | Render
