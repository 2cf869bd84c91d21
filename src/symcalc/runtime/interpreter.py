import sys
from typing import Iterable, TextIO

from lark.exceptions import LarkError

from ..frontend.ast_statements import Assign, Print, Render, Statement
from ..frontend.parser import ParseError, parse_statement
from .core import Env, RuntimeContext
from .errors import ResolutionError
from .renderer import render
from .resolver import resolve, resolve_initial

TOO_DEEP_MESSAGE = "Expression too deeply nested"


def execute_statement(
    statement: Statement,
    env: Env,
    context: RuntimeContext,
) -> str | None:
    """Runs one statement and returns the text to show for it, if any."""
    if isinstance(statement, Assign):
        expression = resolve_initial(statement.expression, env, context)
        env.define(statement.name, expression)
        return None

    if isinstance(statement, Print):
        return str(resolve(statement.expression, env, context))

    if isinstance(statement, Render):
        return render(statement.expression, env, statement.mode)

    raise TypeError(f"Unsupported statement type: {type(statement).__name__}")


def interpret_lines(
    lines: Iterable[str],
    env: Env | None = None,
    context: RuntimeContext | None = None,
) -> Env:
    """Feeds each non-blank line to the resolver, one statement per line.

    Parse and resolution failures are reported and the session moves on to
    the next line.
    """
    env = env if env is not None else Env(name="session")
    context = context or RuntimeContext()
    writer = context.writer

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        try:
            statement = parse_statement(line)
        except (LarkError, ParseError) as error:
            # lark appends the expected-token table on following lines
            summary = str(error).strip().splitlines()[0]
            writer.println(f"Invalid statement: {summary}")
            continue

        try:
            output = execute_statement(statement, env, context)
        except ResolutionError as error:
            writer.println(str(error))
            continue
        except RecursionError:
            # long but acyclic reference chains outgrow the interpreter stack
            writer.println(TOO_DEEP_MESSAGE)
            continue

        if output is not None:
            writer.println(output)

    return env


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> Env | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        return interpret_lines(source.splitlines(), context=context)
    except Exception as error:
        print(f"Runtime error (host): {error}", file=stream)
        return None
