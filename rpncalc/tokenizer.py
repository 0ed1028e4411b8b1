import logging
from typing import Optional

import regex as re

from .config import DEFAULT_LIMITS, Limits
from .errors import (
    CapacityExceededError,
    NullOrMissingInputError,
    UnrecognizedCharacterError,
)
from .symbols import SINGLE_CHAR_TOKENS

logger = logging.getLogger(__name__)

_NUMBER_RUN_PATTERN = re.compile(r"[0-9.]+")
_IDENTIFIER_RUN_PATTERN = re.compile(r"[A-Za-z]+")
_WHITESPACE = frozenset(" \t\n\r\f\v")


def tokenize(expression: Optional[str], limits: Limits = DEFAULT_LIMITS) -> list[str]:
    """
    Split an infix expression into number, identifier, operator and bracket tokens.

    Args:
        expression: Input infix expression, e.g. `"sqrt(16) + 2^3"`.
        limits: Capacity bounds to enforce.

    Returns:
        Tokens in input order. ASCII whitespace (space, tab, newline, carriage
        return, form feed, vertical tab) separates tokens and never produces one.

    Raises:
        NullOrMissingInputError: If expression is None.
        CapacityExceededError: If the expression or the token list is over its limit.
        UnrecognizedCharacterError: On a character outside the accepted alphabet.

    A number run may hold several `.` characters; it is only parsed at evaluation.
    Runs longer than `limits.max_token_length` keep their leading characters only.
    """
    if expression is None:
        raise NullOrMissingInputError("tokenize: no expression given.")
    if len(expression) > limits.max_expression_size:
        raise CapacityExceededError(
            f"tokenize: expression has {len(expression)} characters, "
            f"limit is {limits.max_expression_size}."
        )

    tokens: list[str] = []

    def emit(token: str, position: int) -> None:
        if len(tokens) >= limits.max_tokens:
            raise CapacityExceededError(
                f"tokenize: more than {limits.max_tokens} tokens.", position
            )
        if len(token) > limits.max_token_length:
            logger.debug(
                "tokenize: truncating %d-character token at %d", len(token), position
            )
            token = token[: limits.max_token_length]
        tokens.append(token)

    i = 0
    while i < len(expression):
        char = expression[i]

        if char in _WHITESPACE:
            i += 1
            continue

        # Numbers: digits and dots
        m = _NUMBER_RUN_PATTERN.match(expression, i)
        if m:
            emit(m.group(0), i)
            i = m.end()
            continue

        # Function names: letters only
        m = _IDENTIFIER_RUN_PATTERN.match(expression, i)
        if m:
            emit(m.group(0), i)
            i = m.end()
            continue

        if char in SINGLE_CHAR_TOKENS:
            emit(char, i)
            i += 1
            continue

        raise UnrecognizedCharacterError(
            f"tokenize: unrecognized character '{char}' at {i}.", i
        )

    logger.debug("tokenize: %r -> %s", expression, tokens)
    return tokens
