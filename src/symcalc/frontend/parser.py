from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import VisitError

from ..runtime.core import INT32_MAX, INT32_MIN
from .ast_expressions import (
    BinaryOp,
    Expression,
    ForceResolve,
    Literal,
    Operator,
    Reference,
)
from .ast_statements import Assign, Print, Render, RenderMode, Statement


class ParseError(ValueError):
    """Raised when a line is well-formed for the grammar but not a valid statement."""


class AstTransformer(Transformer[Token, object]):
    def assign(self, children: list[object]) -> Assign:
        [name, expression] = children
        assert isinstance(name, Token)
        return Assign(name=str(name), expression=self._as_expression(expression))

    def print_statement(self, children: list[object]) -> Print:
        [expression] = children
        return Print(self._as_expression(expression))

    def render_statement(self, children: list[object]) -> Render:
        if len(children) == 1:
            [expression] = children
            mode = RenderMode.MIXED
        else:
            [mode_value, expression] = children
            assert isinstance(mode_value, RenderMode)
            mode = mode_value
        return Render(mode=mode, expression=self._as_expression(expression))

    def render_mode(self, children: list[object]) -> RenderMode:
        [keyword] = children
        assert isinstance(keyword, Token)
        return RenderMode(str(keyword))

    def add(self, children: list[object]) -> Expression:
        return self._binary(children, Operator.ADD)

    def sub(self, children: list[object]) -> Expression:
        return self._binary(children, Operator.SUB)

    def mul(self, children: list[object]) -> Expression:
        return self._binary(children, Operator.MUL)

    def div(self, children: list[object]) -> Expression:
        return self._binary(children, Operator.DIV)

    def _binary(self, children: list[object], op: Operator) -> Expression:
        [left, right] = children
        return BinaryOp(self._as_expression(left), op, self._as_expression(right))

    def force_resolve(self, children: list[object]) -> ForceResolve:
        [inner] = children
        return ForceResolve(self._as_expression(inner))

    def reference(self, children: list[object]) -> Reference:
        [name] = children
        assert isinstance(name, Token)
        return Reference(str(name))

    def number(self, children: list[object]) -> Literal:
        [number] = children
        assert isinstance(number, Token)
        value = int(str(number))
        if not INT32_MIN <= value <= INT32_MAX:
            raise ParseError(f"integer literal {value} does not fit in 32 bits")
        return Literal(value)

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("symcalc.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start=["statement", "expr"], parser="lalr")


def parse_tree(source: str, start: str = "statement") -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source, start=start)
    return cast(Tree[Token], tree)


def _transform(tree: Tree[Token]) -> object:
    try:
        return AstTransformer().transform(tree)
    except VisitError as error:
        if isinstance(error.orig_exc, ParseError):
            raise error.orig_exc from None
        raise


def parse_statement(line: str) -> Statement:
    statement = _transform(parse_tree(line, start="statement"))
    assert isinstance(statement, (Assign, Print, Render))
    return statement


def parse_expression(source: str) -> Expression:
    expression = _transform(parse_tree(source, start="expr"))
    assert isinstance(expression, Expression)
    return expression
