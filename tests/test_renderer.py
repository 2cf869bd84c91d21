import pytest

from symcalc.frontend.ast_expressions import BinaryOp, Literal, Operator, Reference
from symcalc.frontend.ast_statements import RenderMode
from symcalc.frontend.parser import parse_expression
from symcalc.runtime import Env, render


@pytest.fixture
def forward_env() -> Env:
    return Env(
        {
            "a": BinaryOp(Reference("b"), Operator.ADD, Literal(1)),
            "b": Literal(5),
        }
    )


@pytest.fixture
def cyclic_env() -> Env:
    return Env(
        {
            "a": BinaryOp(Reference("b"), Operator.ADD, Literal(1)),
            "b": BinaryOp(Reference("a"), Operator.MUL, Literal(2)),
        }
    )


# ===== Shared Structure =====
@pytest.mark.parametrize("mode", list(RenderMode))
def test_literals_and_operators_render_the_same_in_every_mode(mode: RenderMode) -> None:
    expression = parse_expression("1 + 2 * 3 - 8 / 4")

    assert render(expression, Env(), mode) == "((1 + (2 * 3)) - (8 / 4))"


@pytest.mark.parametrize("mode", list(RenderMode))
def test_force_resolve_marker_is_shown(mode: RenderMode) -> None:
    assert render(parse_expression("resolve 1"), Env(), mode) == "resolve 1"


# ===== Mixed =====
def test_mixed_annotates_names_with_values(forward_env: Env) -> None:
    assert render(Reference("a"), forward_env, RenderMode.MIXED) == "a[(b[5] + 1)]"


def test_mixed_marks_unbound_names(forward_env: Env) -> None:
    expression = parse_expression("a * nope")

    assert render(expression, forward_env, RenderMode.MIXED) == "(a[(b[5] + 1)] * nope[?])"


def test_mixed_marks_recursive_names(cyclic_env: Env) -> None:
    assert (
        render(Reference("a"), cyclic_env, RenderMode.MIXED)
        == "a[(b[(a[<recursive>] * 2)] + 1)]"
    )


def test_mixed_expands_diamond_twice() -> None:
    env = Env({"x": Literal(1), "y": BinaryOp(Reference("x"), Operator.ADD, Reference("x"))})

    assert render(Reference("y"), env, RenderMode.MIXED) == "y[(x[1] + x[1])]"


# ===== Eager =====
def test_eager_substitutes_values(forward_env: Env) -> None:
    assert render(Reference("a"), forward_env, RenderMode.EAGER) == "(5 + 1)"


def test_eager_keeps_unbound_names(forward_env: Env) -> None:
    expression = parse_expression("a - nope")

    assert render(expression, forward_env, RenderMode.EAGER) == "((5 + 1) - nope)"


def test_eager_stops_at_recursive_names(cyclic_env: Env) -> None:
    assert render(Reference("a"), cyclic_env, RenderMode.EAGER) == "((a * 2) + 1)"


def test_eager_self_reference() -> None:
    env = Env({"a": Reference("a")})

    assert render(Reference("a"), env, RenderMode.EAGER) == "a"


# ===== Lazy =====
def test_lazy_expands_one_level(forward_env: Env) -> None:
    assert render(Reference("a"), forward_env, RenderMode.LAZY) == "(b + 1)"


def test_lazy_expands_every_top_level_reference(forward_env: Env) -> None:
    expression = parse_expression("a + b")

    assert render(expression, forward_env, RenderMode.LAZY) == "((b + 1) + 5)"


def test_lazy_keeps_unbound_names() -> None:
    assert render(Reference("nope"), Env(), RenderMode.LAZY) == "nope"


def test_lazy_never_follows_cycles(cyclic_env: Env) -> None:
    assert render(Reference("a"), cyclic_env, RenderMode.LAZY) == "(b + 1)"


# ===== Robustness =====
def test_render_does_not_mutate_environment(cyclic_env: Env) -> None:
    before = repr(cyclic_env)

    for mode in RenderMode:
        render(parse_expression("a + b"), cyclic_env, mode)

    assert repr(cyclic_env) == before


def test_render_is_repeatable_after_cycle(cyclic_env: Env) -> None:
    first = render(Reference("a"), cyclic_env, RenderMode.MIXED)

    assert render(Reference("a"), cyclic_env, RenderMode.MIXED) == first


@pytest.mark.parametrize("mode", [RenderMode.MIXED, RenderMode.EAGER])
def test_overly_long_chain_falls_back_to_one_level(mode: RenderMode) -> None:
    env = Env({"a0": Literal(0)})
    for i in range(1, 600):
        env.define(f"a{i}", BinaryOp(Reference(f"a{i - 1}"), Operator.ADD, Literal(1)))

    assert render(Reference("a599"), env, mode) == "(a598 + 1)"
