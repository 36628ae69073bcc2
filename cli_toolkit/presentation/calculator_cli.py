"""Interactive calculator: type "<number> <operator> <number>" or 'quit' to exit."""
import sys
from typing import Optional, TextIO

from cli_toolkit.application.calculator import evaluate
from cli_toolkit.domain.errors import ToolkitError

PROMPT = "> "
QUIT_COMMANDS = ("quit", "exit")


def repl(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Read expressions line by line until quit or end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print("Simple Calculator - type an expression or 'quit' to exit", file=stdout)

    while True:
        stdout.write(PROMPT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            break

        text = line.strip()
        if not text:
            continue

        if text in QUIT_COMMANDS:
            print("Goodbye!", file=stdout)
            break

        try:
            print(f"= {evaluate(text)}", file=stdout)
        except ToolkitError as e:
            print(f"Error: {e}", file=stdout)


def main() -> int:
    try:
        repl()
    except KeyboardInterrupt:
        print()
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
