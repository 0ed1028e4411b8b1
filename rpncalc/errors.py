"""
Error type definitions for rpncalc.
"""

from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    """
    Classification of every failure the calculator can report.

    Attributes:
        NULL_OR_MISSING_INPUT: No expression was given.
        CAPACITY_EXCEEDED: Expression, token count or stack depth over its limit.
        UNRECOGNIZED_CHARACTER: Input character outside the lexical alphabet.
        UNRECOGNIZED_TOKEN: Token that is neither number, operator, function nor bracket.
        MISMATCHED_BRACKETS: Unmatched opening or closing bracket.
        STACK_UNDERFLOW: Pop or peek on an empty stack.
        INVALID_OPERAND: Operand outside the domain of an operator or function.
        DIVISION_BY_ZERO: Right-hand operand of `/` is zero.
        MALFORMED_EXPRESSION: Operand count does not match the operators.
    """

    NULL_OR_MISSING_INPUT = "null_or_missing_input"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    UNRECOGNIZED_CHARACTER = "unrecognized_character"
    UNRECOGNIZED_TOKEN = "unrecognized_token"
    MISMATCHED_BRACKETS = "mismatched_brackets"
    STACK_UNDERFLOW = "stack_underflow"
    INVALID_OPERAND = "invalid_operand"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_EXPRESSION = "malformed_expression"


class CalcError(ValueError):
    """Base error type for rpncalc"""

    kind: ErrorKind

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        super().__init__(message)


class NullOrMissingInputError(CalcError):
    kind = ErrorKind.NULL_OR_MISSING_INPUT


class CapacityExceededError(CalcError):
    kind = ErrorKind.CAPACITY_EXCEEDED


class UnrecognizedCharacterError(CalcError):
    kind = ErrorKind.UNRECOGNIZED_CHARACTER


class UnrecognizedTokenError(CalcError):
    kind = ErrorKind.UNRECOGNIZED_TOKEN


class MismatchedBracketsError(CalcError):
    kind = ErrorKind.MISMATCHED_BRACKETS


class StackUnderflowError(CalcError):
    kind = ErrorKind.STACK_UNDERFLOW


class InvalidOperandError(CalcError):
    kind = ErrorKind.INVALID_OPERAND


class DivisionByZeroError(CalcError):
    kind = ErrorKind.DIVISION_BY_ZERO


class MalformedExpressionError(CalcError):
    kind = ErrorKind.MALFORMED_EXPRESSION
