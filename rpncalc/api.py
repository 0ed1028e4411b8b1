import logging
from typing import Optional

from .config import DEFAULT_LIMITS, Limits
from .evaluator import evaluate
from .infix2postfix import infix2postfix
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def compile(expression: Optional[str], limits: Limits = DEFAULT_LIMITS) -> list[str]:
    """
    Tokenize an infix expression and convert it to postfix tokens.

    Raises:
        CalcError: From `tokenize` or `infix2postfix`.
    """
    return infix2postfix(tokenize(expression, limits), limits)


def calculate(expression: Optional[str], limits: Limits = DEFAULT_LIMITS) -> float:
    R"""
    Evaluate an infix expression.

    Args:
        expression: Input infix expression.
        limits: Capacity bounds and grammar switches used by every stage.

    Returns:
        The value of the expression.

    Raises:
        CalcError: The first error raised by any stage. Its `kind` attribute
            classifies the failure.

    ## Syntax

    - **Numbers:** digits with an optional decimal point (`3`, `2.5`, `.5`).
      There is no exponent notation.
    - **Operators**, tightest first:
        - `!` factorial (postfix, operand must be a non-negative integer)
        - `^` power, right associative (`2^3^2 == 512`)
        - `*`, `/`
        - `+`, `-`
    - **Functions:** `sqrt log ln sin cos tan cosh sinh tanh asin acos atan`,
      plus `arcsin arccos arctan`. The operand goes in brackets: `sin(0)`.
      `log` is base 10 and `ln` is the natural logarithm. Angles are in radians.
    - **Brackets:** `()`, `[]` and `{}` all group.
    - **Signs:** `-3`, `(-3)!` and `2*-4` are accepted when
      `limits.fold_signs` is on (the default). A folded sign belongs to the
      number itself, so it binds tighter than `^` and `!`: `-2^2 == 4` and
      `-3!` is rejected as a negative factorial. Write `-(2^2)` as `0-2^2`.
    """
    tokens = tokenize(expression, limits)
    postfix = infix2postfix(tokens, limits)
    result = evaluate(postfix, limits)
    logger.debug("calculate: %r = %r", expression, result)
    return result
