from .runtime.core import RuntimeContext
from .runtime.interpreter import interpret_lines
from .snippets import forward_reference_session, snapshot_session
from .writer import IndentingWriter, surrounding_box_title


def run_demo() -> None:
    writer = IndentingWriter()
    context = RuntimeContext(writer=writer)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("FORWARD REFERENCES AND CYCLES")

    with surrounding_box_title(writer, omit_lower_line=True):
        interpret_lines(forward_reference_session(include_cycle=True).splitlines(), context=context)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("RESOLVE SNAPSHOTS")

    with surrounding_box_title(writer):
        interpret_lines(snapshot_session().splitlines(), context=context)


if __name__ == "__main__":
    run_demo()
