import logging
import math
from typing import Optional, Sequence

from .appliers import apply_function, apply_operation, factorial
from .config import DEFAULT_LIMITS, Limits
from .errors import (
    CalcError,
    CapacityExceededError,
    InvalidOperandError,
    MalformedExpressionError,
    NullOrMissingInputError,
    StackUnderflowError,
    UnrecognizedTokenError,
)
from .stack import ValueStack
from .symbols import Operator, is_function, is_number, is_operator

logger = logging.getLogger(__name__)


def evaluate(
    postfix: Sequence[str],
    limits: Limits = DEFAULT_LIMITS,
    stack: Optional[ValueStack] = None,
) -> float:
    """
    Evaluate a postfix (RPN) token sequence.

    Args:
        postfix: Postfix tokens, e.g. `["3", "4", "2", "*", "+"]`.
        limits: Capacity bounds to enforce.
        stack: Scratch stack to evaluate on. A fresh one is created when omitted.
            Whatever it holds on entry is discarded, and it is left empty on failure.

    Returns:
        The single value left on the stack.

    Raises:
        NullOrMissingInputError: If postfix is None.
        CapacityExceededError: If there are too many tokens or too many pending operands.
        MalformedExpressionError: If operands and operators do not balance, or a number does not parse.
        InvalidOperandError: If `!` gets a negative, fractional or non-finite operand, or a math domain error occurs.
        DivisionByZeroError: On division by zero.
        UnrecognizedTokenError: On a token that is not a number, operator or function.
    """
    if postfix is None:
        raise NullOrMissingInputError("evaluate: no postfix expression given.")
    if len(postfix) > limits.max_tokens:
        raise CapacityExceededError(
            f"evaluate: {len(postfix)} tokens, limit is {limits.max_tokens}."
        )

    if stack is None:
        stack = ValueStack(limits.max_stack_depth)
    else:
        stack.clear()

    try:
        result = _run(postfix, stack)
    except CalcError:
        stack.clear()
        raise

    logger.debug("evaluate: %s -> %r", list(postfix), result)
    return result


def _run(postfix: Sequence[str], stack: ValueStack) -> float:
    for i, token in enumerate(postfix):

        def pop() -> float:
            try:
                return stack.pop()
            except StackUnderflowError as e:
                raise MalformedExpressionError(
                    f"evaluate: not enough operands for '{token}' at {i}.", i
                ) from e

        # Numbers
        if is_number(token):
            try:
                value = float(token)
            except ValueError as e:
                raise MalformedExpressionError(
                    f"evaluate: malformed number '{token}' at {i}.", i
                ) from e
            if not math.isfinite(value):
                raise InvalidOperandError(
                    f"evaluate: number '{token}' at {i} is out of range.", i
                )
            stack.push(value)
            continue

        # Factorial, the only unary operator
        if token == Operator.FACT:
            a = pop()
            if not math.isfinite(a) or a < 0 or a != int(a):
                raise InvalidOperandError(
                    f"evaluate: factorial needs a non-negative integer, got {a} at {i}.",
                    i,
                )
            stack.push(factorial(int(a)))
            continue

        # Binary operators
        if is_operator(token):
            b = pop()
            a = pop()
            stack.push(apply_operation(token, a, b))
            continue

        # Unary functions
        if is_function(token):
            a = pop()
            stack.push(apply_function(token, a))
            continue

        raise UnrecognizedTokenError(
            f"evaluate: unrecognized token '{token}' at {i}.", i
        )

    if len(stack) != 1:
        raise MalformedExpressionError(
            f"evaluate: expression left {len(stack)} values on the stack, but 1 was expected."
        )
    return stack.pop()
