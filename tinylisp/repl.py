"""Command line driver: batch evaluation with -e, otherwise an interactive REPL.

Each input line is one expression. Results are printed on stdout, errors on
stderr, and an error never ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from tinylisp import __version__, config
from tinylisp.errors import EvalError, LispSyntaxError
from tinylisp.interpreter import Interpreter
from tinylisp.log import setup_logging

logger = logging.getLogger(__name__)

PROMPT = "tinylisp> "
CONTEXT_COMMAND = "?ctx"


def run_line(
    interp: Interpreter,
    line: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """Evaluate one line and report the outcome. Returns False on error."""
    out = out or sys.stdout
    err = err or sys.stderr
    if line.strip() == CONTEXT_COMMAND:
        print(repr(interp.env), file=out)
        return True
    try:
        result = interp.eval_to_string(line)
    except LispSyntaxError as ex:
        print(ex, file=err)
        return False
    except EvalError as ex:
        print(f"Eval error: {ex}", file=err)
        return False
    if result is not None:
        print(result, file=out)
    return True


def run_batch(
    interp: Interpreter,
    lines: Iterable[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Evaluate lines in order in one session. Returns the number of failures."""
    failures = 0
    for line in lines:
        if not run_line(interp, line, out, err):
            failures += 1
    return failures


def _load_history(path: Path):
    try:
        import readline
    except ImportError:
        return None
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        print("No previous history.")
    except OSError as ex:
        logger.warning("could not read history file %s: %s", path, ex)
    return readline


def repl(interp: Interpreter, history_file: Path) -> None:
    print(f"tinylisp version {__version__}\nPress Ctrl+C to exit")
    readline = _load_history(history_file)

    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("CTRL-C")
            break
        except EOFError:
            print()
            break
        run_line(interp, line)

    if readline is not None:
        try:
            readline.write_history_file(history_file)
        except OSError as ex:
            logger.warning("could not write history file %s: %s", history_file, ex)


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text!r}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylisp",
        description="Evaluate tinylisp expressions, one per line.",
    )
    parser.add_argument("-e", "--expr", help="evaluate each line of EXPR and exit")
    parser.add_argument("-d", "--debug", action="store_true", help="enable debug logging")
    parser.add_argument(
        "--history-file",
        type=Path,
        default=None,
        help="REPL history file (default: $TINYLISP_HISTORY_FILE or history.txt)",
    )
    parser.add_argument("--max-depth", type=positive_int, default=None, help="maximum evaluation depth")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging("DEBUG" if args.debug else config.get_log_level())

    interp = Interpreter(max_depth=args.max_depth)
    if args.expr is not None:
        run_batch(interp, args.expr.splitlines())
        return 0

    repl(interp, args.history_file or config.get_history_file())
    return 0


if __name__ == "__main__":
    sys.exit(main())
