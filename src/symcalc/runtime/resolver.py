import copy
import operator
from typing import Callable

from ..frontend.ast_expressions import (
    BinaryOp,
    Expression,
    ForceResolve,
    Literal,
    Operator,
    Reference,
)
from ..writer import indented_output
from .core import Env, RuntimeContext, truncating_div, wrap_int32
from .errors import CyclicDefinition, DivisionByZero, ResolutionError, UndefinedName
from .traversal import ExpressionVisitor, walk

_binary_ops: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: truncating_div,
}


def resolve(
    expression: Expression,
    env: Env,
    context: RuntimeContext | None = None,
) -> int:
    """Reduces `expression` to an integer, looking names up in `env`.

    Raises a `ResolutionError` when a name is unbound, a divisor is zero, or a
    name is reached again while it is still being resolved. The environment
    is never modified.
    """
    return _resolve(expression, env, set(), context or RuntimeContext())


def _resolve(
    expression: Expression,
    env: Env,
    in_flight: set[str],
    context: RuntimeContext,
) -> int:
    if isinstance(expression, Literal):
        return expression.value

    if isinstance(expression, Reference):
        return _resolve_reference(expression.name, env, in_flight, context)

    if isinstance(expression, BinaryOp):
        return _resolve_binary_op(expression, env, in_flight, context)

    if isinstance(expression, ForceResolve):
        return _resolve(expression.inner, env, in_flight, context)

    raise TypeError(f"Unsupported expression type: {type(expression).__name__}")


def _resolve_reference(
    name: str,
    env: Env,
    in_flight: set[str],
    context: RuntimeContext,
) -> int:
    if name in in_flight:
        raise CyclicDefinition(name, copy.deepcopy(env.get(name)))

    bound = env.get(name)
    if bound is None:
        raise UndefinedName(name)

    in_flight.add(name)
    try:
        context.writer.debugln(f"[{name} -> {bound}]")
        with indented_output(context.writer):
            value = _resolve(bound, env, in_flight, context)
    finally:
        in_flight.discard(name)

    context.writer.debugln(f"[{name} => {value}]")
    return value


def _resolve_binary_op(
    expression: BinaryOp,
    env: Env,
    in_flight: set[str],
    context: RuntimeContext,
) -> int:
    left_value = _resolve(expression.left, env, in_flight, context)
    right_value = _resolve(expression.right, env, in_flight, context)

    if expression.op is Operator.DIV and right_value == 0:
        raise DivisionByZero(dividend=left_value)

    result = wrap_int32(_binary_ops[expression.op](left_value, right_value))
    context.writer.debugln(
        f"[({expression.left}) {expression.op} ({expression.right}) => {result}]"
    )
    return result


def resolve_initial(
    expression: Expression,
    env: Env,
    context: RuntimeContext | None = None,
) -> Expression:
    """Replaces every `ForceResolve` node in `expression` with its value.

    Rewrites happen in place and the walk stops at the first node that fails
    to resolve; that error is raised. Nodes rewritten before the failure stay
    rewritten, so a tree from a failed call must not be stored. Returns the
    new root, which differs from `expression` only when the root itself was a
    `ForceResolve`.
    """
    context = context or RuntimeContext()
    failures: list[ResolutionError] = []

    def collapse(node: ForceResolve) -> Expression | None:
        try:
            value = _resolve(node.inner, env, set(), context)
        except ResolutionError as error:
            failures.append(error)
            return None
        context.writer.debugln(f"[{node} => {value}]")
        return Literal(value)

    visitor = ExpressionVisitor(
        on_force_resolve=collapse,
        should_continue=lambda: not failures,
    )
    root = walk(expression, visitor)

    if failures:
        raise failures[0]
    return root
