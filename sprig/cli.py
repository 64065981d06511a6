"""Command line entry point: run a Sprig file or start an interactive loop."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sprig import __version__, config
from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.types.value import VoidType

logger = logging.getLogger(__name__)


def format_error(err: SprigError) -> str:
    return f"{err.label}: {err.message}"


def run_script(interp: Interpreter, path: Path) -> int:
    """Evaluate the single top-level form in `path` and print its value."""
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        result = interp.eval(source)
    except SprigError as e:
        print(format_error(e))
        return 1
    print(result)
    return 0


def repl(interp: Interpreter, prompt: str) -> int:
    """Read-eval-print loop, one line per expression, until end of input."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except SprigError as e:
            # A failed line leaves the session's definitions untouched
            print(format_error(e))
            continue
        if not isinstance(result, VoidType):
            print(result)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sprig", description="Sprig: a small Lisp interpreter")
    parser.add_argument('file', type=Path, nargs='?',
                        help='Source file holding one top-level form (starts the interactive loop if omitted)')
    parser.add_argument('--dialect', choices=('basic', 'extended'), default=None,
                        help='Reader dialect (default: $SPRIG_DIALECT or extended)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level, e.g. DEBUG or INFO (default: $SPRIG_LOG_LEVEL or WARNING)')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    try:
        dialect = args.dialect or config.get_dialect()
        if args.log_level is not None:
            level = logging.getLevelName(args.log_level.upper())
            if not isinstance(level, int):
                parser.error(f"unknown log level {args.log_level!r}")
        else:
            level = config.get_log_level()
        recursion_limit = config.get_recursion_limit()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if recursion_limit is not None:
        logger.debug("Setting recursion limit to %d", recursion_limit)
        sys.setrecursionlimit(recursion_limit)

    interp = Interpreter(extended=(dialect == "extended"))
    if args.file is not None:
        return run_script(interp, args.file)
    return repl(interp, config.get_prompt())


if __name__ == '__main__':
    sys.exit(main())
