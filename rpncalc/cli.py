import argparse
import dataclasses
import logging
import sys
from typing import Iterable, Optional

from .config import DEFAULT_LIMITS, Limits
from .errors import CalcError
from .evaluator import evaluate
from .infix2postfix import infix2postfix
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

_QUIT_COMMANDS = {"quit", "exit", "q"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="Evaluate infix math expressions through a Shunting-Yard / RPN pipeline. "
        "Reads one expression per line from stdin when none is given.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '3 + 4 * 2' or 'sqrt(16)'.",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression.",
    )
    parser.add_argument(
        "--strict-brackets",
        action="store_true",
        help="Require each closing bracket to match the kind of its opening bracket.",
    )
    parser.add_argument(
        "--fold-signs",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_LIMITS.fold_signs,
        help="Treat a leading +/- before a number as its sign (default: %(default)s).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every pipeline stage.",
    )
    return parser


def format_result(value: float) -> str:
    return format(value, ".15g")


def run_expression(expression: str, limits: Limits, show_postfix: bool) -> bool:
    """Evaluate one expression and print the outcome. Returns False on failure."""
    try:
        postfix = infix2postfix(tokenize(expression, limits), limits)
        if show_postfix:
            print(f"postfix: {' '.join(postfix)}")
        result = evaluate(postfix, limits)
    except CalcError as e:
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        return False
    print(format_result(result))
    return True


def _read_expressions(stream) -> Iterable[str]:
    interactive = stream.isatty()
    while True:
        if interactive:
            print("> ", end="", flush=True)
        line = stream.readline()
        if not line:
            return
        line = line.strip()
        if line.lower() in _QUIT_COMMANDS:
            return
        if line:
            yield line


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for the `rpncalc` console script.

    Returns:
        0 if every expression was evaluated, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    limits = dataclasses.replace(
        DEFAULT_LIMITS,
        strict_brackets=args.strict_brackets,
        fold_signs=args.fold_signs,
    )
    logger.debug("main: using %s", limits)

    expressions = args.expressions or _read_expressions(sys.stdin)
    ok = True
    for expression in expressions:
        ok = run_expression(expression, limits, args.postfix) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
