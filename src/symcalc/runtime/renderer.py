from ..frontend.ast_expressions import (
    BinaryOp,
    Expression,
    ForceResolve,
    Literal,
    Reference,
)
from ..frontend.ast_statements import RenderMode
from .core import Env

RECURSIVE_MARKER = "<recursive>"
UNBOUND_MARKER = "?"


def render(expression: Expression, env: Env, mode: RenderMode) -> str:
    """Renders `expression` for display; never raises on bad bindings.

    - MIXED annotates each reference with its value: `a[(b[5] + 1)]`.
    - EAGER substitutes values for references: `(5 + 1)`.
    - LAZY expands each reference by a single level: `(b + 1)`.

    Cycles and unbound names degrade to in-band markers instead of errors.
    A reference chain too long to expand on the interpreter stack falls back
    to the single-level LAZY form.
    """
    try:
        return _render(expression, env, mode, set())
    except RecursionError:
        if mode is RenderMode.LAZY:
            raise
    return _render(expression, env, RenderMode.LAZY, set())


def _render(
    expression: Expression,
    env: Env,
    mode: RenderMode,
    expanding: set[str],
) -> str:
    if isinstance(expression, Literal):
        return str(expression.value)

    if isinstance(expression, Reference):
        return _render_reference(expression.name, env, mode, expanding)

    if isinstance(expression, BinaryOp):
        left = _render(expression.left, env, mode, expanding)
        right = _render(expression.right, env, mode, expanding)
        return f"({left} {expression.op} {right})"

    if isinstance(expression, ForceResolve):
        return f"resolve {_render(expression.inner, env, mode, expanding)}"

    raise TypeError(f"Unsupported expression type: {type(expression).__name__}")


def _render_reference(
    name: str,
    env: Env,
    mode: RenderMode,
    expanding: set[str],
) -> str:
    bound = env.get(name)

    if mode is RenderMode.LAZY:
        # nested references stay symbolic, so no cycle bookkeeping is needed
        return name if bound is None else str(bound)

    if mode is RenderMode.MIXED:
        if name in expanding:
            return f"{name}[{RECURSIVE_MARKER}]"
        if bound is None:
            return f"{name}[{UNBOUND_MARKER}]"
        return f"{name}[{_expand(name, bound, env, mode, expanding)}]"

    if name in expanding or bound is None:
        return name
    return _expand(name, bound, env, mode, expanding)


def _expand(
    name: str,
    bound: Expression,
    env: Env,
    mode: RenderMode,
    expanding: set[str],
) -> str:
    expanding.add(name)
    try:
        return _render(bound, env, mode, expanding)
    finally:
        expanding.discard(name)
