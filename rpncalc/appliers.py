import math
from types import MappingProxyType
from typing import Callable

from .errors import (
    CalcError,
    DivisionByZeroError,
    InvalidOperandError,
    UnrecognizedTokenError,
)
from .symbols import Function, Operator, is_function, is_operator


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError(f"apply_operation: division of {a} by zero.")
    return a / b


_BINARY_OPERATIONS: MappingProxyType[Operator, Callable[[float, float], float]] = (
    MappingProxyType(
        {
            Operator.ADD: lambda a, b: a + b,
            Operator.SUB: lambda a, b: a - b,
            Operator.MUL: lambda a, b: a * b,
            Operator.DIV: _divide,
            Operator.POW: math.pow,
        }
    )
)

_FUNCTIONS: MappingProxyType[Function, Callable[[float], float]] = MappingProxyType(
    {
        Function.SQRT: math.sqrt,
        Function.LOG: math.log10,
        Function.LN: math.log,
        Function.SIN: math.sin,
        Function.COS: math.cos,
        Function.TAN: math.tan,
        Function.COSH: math.cosh,
        Function.SINH: math.sinh,
        Function.TANH: math.tanh,
        Function.ASIN: math.asin,
        Function.ACOS: math.acos,
        Function.ATAN: math.atan,
        Function.ARCSIN: math.asin,
        Function.ARCCOS: math.acos,
        Function.ARCTAN: math.atan,
    }
)


def _checked(name: str, result: float) -> float:
    if not math.isfinite(result):
        raise InvalidOperandError(f"{name}: result {result} is out of range.")
    return result


def apply_operation(op: str, a: float, b: float) -> float:
    """
    Apply a binary operator to `a` (left) and `b` (right).

    Raises:
        DivisionByZeroError: If op is `/` and b is zero.
        InvalidOperandError: On a math domain error or a non-finite result.
        UnrecognizedTokenError: If op is not a binary operator (`!` included).
    """
    if not is_operator(op) or Operator(op) not in _BINARY_OPERATIONS:
        raise UnrecognizedTokenError(f"apply_operation: '{op}' is not a binary operator.")
    try:
        result = _BINARY_OPERATIONS[Operator(op)](a, b)
    except CalcError:
        raise
    except (ValueError, OverflowError) as e:
        raise InvalidOperandError(f"apply_operation: {a} {op} {b}: {e}") from e
    return _checked("apply_operation", result)


def apply_function(name: str, x: float) -> float:
    """
    Apply a unary function to `x`.

    Raises:
        InvalidOperandError: If x is outside the function's domain or the result overflows.
        UnrecognizedTokenError: If name is not a known function.
    """
    if not is_function(name):
        raise UnrecognizedTokenError(f"apply_function: '{name}' is not a function.")
    try:
        result = _FUNCTIONS[Function(name)](x)
    except (ValueError, OverflowError) as e:
        raise InvalidOperandError(f"apply_function: {name}({x}): {e}") from e
    return _checked("apply_function", result)


def factorial(n: int) -> float:
    """
    Iterative factorial as a float. `factorial(0) == factorial(1) == 1.0`.

    Raises:
        InvalidOperandError: If n is negative or n! does not fit in a float.
    """
    if n < 0:
        raise InvalidOperandError(f"factorial: negative operand {n}.")
    result = 1.0
    for k in range(2, n + 1):
        result *= k
        if math.isinf(result):
            raise InvalidOperandError(f"factorial: {n}! is out of range.")
    return result
