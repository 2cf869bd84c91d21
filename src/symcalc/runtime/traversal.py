"""Generic depth-first walk over an expression tree.

A walk is driven by an `ExpressionVisitor`: a plain strategy object holding
optional callbacks, one per node kind, plus a `should_continue` predicate.
Every callback defaults to "do nothing and keep descending". A node callback
may return a replacement node, which the walk stores in the parent's slot;
a replaced binary operation or force-resolve node is not descended into.

`should_continue` is consulted before entering every subtree and again
between the left and the right operand of a binary operation. Once it turns
false, the rest of the tree is left unvisited.
"""

from dataclasses import dataclass
from typing import Callable, TypeVar

from ..frontend.ast_expressions import (
    BinaryOp,
    Expression,
    ForceResolve,
    Literal,
    Operator,
    Reference,
)

NodeT = TypeVar("NodeT", bound=Expression)
NodeHandler = Callable[[NodeT], Expression | None]


def _always() -> bool:
    return True


@dataclass
class ExpressionVisitor:
    on_literal: NodeHandler[Literal] | None = None
    on_reference: NodeHandler[Reference] | None = None
    on_operator: Callable[[Operator], Operator | None] | None = None
    on_binary_op: NodeHandler[BinaryOp] | None = None
    on_force_resolve: NodeHandler[ForceResolve] | None = None
    should_continue: Callable[[], bool] = _always


def walk(expression: Expression, visitor: ExpressionVisitor) -> Expression:
    """Walks `expression` left to right and returns the (possibly replaced) root."""
    if not visitor.should_continue():
        return expression

    if isinstance(expression, Literal):
        return _visit_leaf(expression, visitor.on_literal)

    if isinstance(expression, Reference):
        return _visit_leaf(expression, visitor.on_reference)

    if isinstance(expression, BinaryOp):
        return _visit_binary_op(expression, visitor)

    if isinstance(expression, ForceResolve):
        return _visit_force_resolve(expression, visitor)

    raise TypeError(f"Unsupported expression type: {type(expression).__name__}")


def _visit_leaf(node: NodeT, handler: NodeHandler[NodeT] | None) -> Expression:
    if handler is None:
        return node
    replacement = handler(node)
    return node if replacement is None else replacement


def _visit_binary_op(node: BinaryOp, visitor: ExpressionVisitor) -> Expression:
    if visitor.on_binary_op is not None:
        replacement = visitor.on_binary_op(node)
        if replacement is not None:
            return replacement

    node.left = walk(node.left, visitor)

    if not visitor.should_continue():
        return node

    if visitor.on_operator is not None:
        op = visitor.on_operator(node.op)
        if op is not None:
            node.op = op

    node.right = walk(node.right, visitor)
    return node


def _visit_force_resolve(node: ForceResolve, visitor: ExpressionVisitor) -> Expression:
    if visitor.on_force_resolve is not None:
        replacement = visitor.on_force_resolve(node)
        if replacement is not None:
            return replacement

    node.inner = walk(node.inner, visitor)
    return node
