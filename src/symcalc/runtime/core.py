from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from ..frontend.ast_expressions import Expression
from ..writer import IndentingWriter

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def wrap_int32(value: int) -> int:
    """Wraps an arbitrary integer to 32-bit two's complement."""
    return (value - INT32_MIN) % 2**32 + INT32_MIN


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, as fixed-width machine division does."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_int32(quotient)


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)


class Env:
    def __init__(
        self,
        bindings: Mapping[str, Expression] | None = None,
        name: str = "",
    ) -> None:
        self._name = name
        self._key_values: dict[str, Expression] = {}

        if bindings is not None:
            for key, value in bindings.items():
                self.define(key, value)

    def __getitem__(self, key: str) -> Expression:
        return self._key_values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._key_values

    def __iter__(self) -> Iterator[str]:
        return iter(self._key_values)

    def __len__(self) -> int:
        return len(self._key_values)

    def get(self, key: str) -> Expression | None:
        return self._key_values.get(key)

    def define(self, key: str, value: Expression) -> None:
        self._key_values[key] = value

    def all_vars(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "self": [(key, str(value)) for key, value in self._key_values.items()],
        }

    def __repr__(self) -> str:
        bindings = ", ".join(f"{key} = {value}" for key, value in self._key_values.items())
        return f"{{{bindings}}}:{self._name}"
