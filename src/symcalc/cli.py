"""
symcalc CLI - evaluate a file (or stdin) one statement per line.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from .runtime.core import RuntimeContext
from .runtime.interpreter import interpret_lines
from .writer import IndentingWriter

app = typer.Typer(help="Resolve and render symbolic arithmetic, line by line.")


@app.command()
def main(
    source: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File of statements. Reads stdin when omitted.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Trace each resolution step."),
) -> None:
    """Run every statement and print values, renderings and diagnostics."""
    context = RuntimeContext(writer=IndentingWriter(debug=debug))

    if source is not None:
        typer.echo(f"Executing lines from {source}")
        with source.open(encoding="utf-8") as lines:
            interpret_lines(lines, context=context)
    else:
        interpret_lines(sys.stdin, context=context)


if __name__ == "__main__":
    app()
