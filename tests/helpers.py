from io import StringIO
from typing import TextIO

from symcalc.runtime.core import Env, RuntimeContext
from symcalc.runtime.interpreter import interpret_lines
from symcalc.writer import IndentingWriter


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output


def run_session(source: str, env: Env | None = None) -> list[str]:
    stdout = StringIO()
    context = RuntimeContext(writer=IndentingWriter(debug=False, stream=stdout))
    interpret_lines(source.splitlines(), env=env, context=context)
    return stdout.getvalue().splitlines()
