import logging
from typing import Optional, Sequence

from .config import DEFAULT_LIMITS, Limits
from .errors import (
    CapacityExceededError,
    MismatchedBracketsError,
    NullOrMissingInputError,
    UnrecognizedTokenError,
)
from .stack import OperatorStack
from .symbols import (
    BRACKET_PAIRS,
    Operator,
    is_close_bracket,
    is_function,
    is_number,
    is_open_bracket,
    is_operator,
    is_right_associative,
    precedence_of,
)

logger = logging.getLogger(__name__)

_SIGNS = frozenset({Operator.ADD.value, Operator.SUB.value})


def _in_prefix_position(previous: Optional[str]) -> bool:
    """A sign here cannot be a binary operator: nothing on its left to operate on."""
    if previous is None or is_open_bracket(previous):
        return True
    return is_operator(previous) and previous != Operator.FACT


def _should_pop(top: str, token: str) -> bool:
    if is_function(top):
        return True
    if not is_operator(top):
        return False
    top_prec = precedence_of(top)
    token_prec = precedence_of(token)
    return top_prec < token_prec or (
        top_prec == token_prec and not is_right_associative(token)
    )


def infix2postfix(tokens: Sequence[str], limits: Limits = DEFAULT_LIMITS) -> list[str]:
    R"""
    Convert infix tokens to postfix (RPN) order with the Shunting-Yard algorithm.

    Args:
        tokens: Infix tokens as produced by `tokenize`.
        limits: Capacity bounds and bracket/sign switches.

    Returns:
        Postfix tokens. Brackets never appear in the output.

    Raises:
        NullOrMissingInputError: If tokens is None.
        CapacityExceededError: If there are too many tokens or operators nest too deep.
        MismatchedBracketsError: On an unclosed or unopened bracket.
        UnrecognizedTokenError: On a token that is not a number, operator, function or bracket.

    ## Grammar notes

    - `( [ {` are interchangeable grouping brackets; `(3+4]` is accepted unless
      `limits.strict_brackets` is set.
    - A function takes its single operand through the bracket that follows it:
      `sqrt(16)` -> `16 sqrt`.
    - `^` and `!` group right to left, `+ - * /` left to right.
    - With `limits.fold_signs`, a `+`/`-` at the start, after an opening bracket
      or after a binary operator is merged into the number right after it:
      `(-3)!` -> `-3 !`.
    """
    if tokens is None:
        raise NullOrMissingInputError("infix2postfix: no tokens given.")
    if len(tokens) > limits.max_tokens:
        raise CapacityExceededError(
            f"infix2postfix: {len(tokens)} tokens, limit is {limits.max_tokens}."
        )

    output: list[str] = []
    op_stack = OperatorStack(limits.max_stack_depth)
    previous: Optional[str] = None

    i = 0
    while i < len(tokens):
        token = tokens[i]

        # Signed number literal
        if (
            limits.fold_signs
            and token in _SIGNS
            and _in_prefix_position(previous)
            and i + 1 < len(tokens)
            and is_number(tokens[i + 1])
            and tokens[i + 1][0] not in _SIGNS
        ):
            number = tokens[i + 1]
            literal = f"-{number}" if token == Operator.SUB else number
            output.append(literal[: limits.max_token_length])
            previous = number
            i += 2
            continue

        if is_number(token):
            output.append(token)

        elif is_function(token):
            op_stack.push(token)

        elif is_open_bracket(token):
            op_stack.push(token)

        elif is_close_bracket(token):
            while not op_stack.is_empty() and not is_open_bracket(op_stack.peek()):
                output.append(op_stack.pop())
            if op_stack.is_empty():
                raise MismatchedBracketsError(
                    f"infix2postfix: closing bracket '{token}' at {i} has no opening bracket.",
                    i,
                )
            opening = op_stack.pop()
            if limits.strict_brackets and BRACKET_PAIRS[opening] != token:
                raise MismatchedBracketsError(
                    f"infix2postfix: '{opening}' closed by '{token}' at {i}.", i
                )
            # the bracket carried a function's operand
            if not op_stack.is_empty() and is_function(op_stack.peek()):
                output.append(op_stack.pop())

        elif is_operator(token):
            while not op_stack.is_empty() and _should_pop(op_stack.peek(), token):
                output.append(op_stack.pop())
            op_stack.push(token)

        else:
            raise UnrecognizedTokenError(
                f"infix2postfix: unrecognized token '{token}' at {i}.", i
            )

        previous = token
        i += 1

    while not op_stack.is_empty():
        top = op_stack.pop()
        if is_open_bracket(top):
            raise MismatchedBracketsError(
                f"infix2postfix: opening bracket '{top}' is never closed."
            )
        output.append(top)

    logger.debug("infix2postfix: %s -> %s", list(tokens), output)
    return output


to_postfix = infix2postfix
