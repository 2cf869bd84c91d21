from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


class Expression:
    pass


# Nodes are mutable so that a traversal can rewrite a subtree in place.
# A tree is owned by whoever holds it: an environment entry or a transient
# expression being printed or rendered.
@dataclass(slots=True)
class Literal(Expression):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class Reference(Expression):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class BinaryOp(Expression):
    left: Expression
    op: Operator
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


# Collapse `inner` to a literal before the enclosing expression is stored.
@dataclass(slots=True)
class ForceResolve(Expression):
    inner: Expression

    def __str__(self) -> str:
        return f"resolve {self.inner}"
