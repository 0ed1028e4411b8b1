'''
Infix math expression calculator built on tokenization, Shunting-Yard conversion and RPN evaluation.
'''

from .api import calculate, compile
from .appliers import apply_function, apply_operation, factorial
from .config import DEFAULT_LIMITS, Limits
from .errors import (
    CalcError,
    CapacityExceededError,
    DivisionByZeroError,
    ErrorKind,
    InvalidOperandError,
    MalformedExpressionError,
    MismatchedBracketsError,
    NullOrMissingInputError,
    StackUnderflowError,
    UnrecognizedCharacterError,
    UnrecognizedTokenError,
)
from .evaluator import evaluate
from .infix2postfix import infix2postfix, to_postfix
from .postfix2infix import postfix2infix
from .stack import BoundedStack, OperatorStack, ValueStack
from .symbols import (
    Function,
    Operator,
    Precedence,
    TokenKind,
    classify_token,
    is_right_associative,
    precedence_of,
    which_function,
    which_operator,
)
from .tokenizer import tokenize
from .verify import verify_postfix

__version__ = "0.0.1"

__all__ = [
    "calculate",
    "compile",
    "tokenize",
    "infix2postfix",
    "to_postfix",
    "evaluate",
    "postfix2infix",
    "verify_postfix",
    "apply_operation",
    "apply_function",
    "factorial",
    "which_operator",
    "which_function",
    "precedence_of",
    "is_right_associative",
    "Operator",
    "Function",
    "Precedence",
    "TokenKind",
    "classify_token",
    "BoundedStack",
    "OperatorStack",
    "ValueStack",
    "Limits",
    "DEFAULT_LIMITS",
    "ErrorKind",
    "CalcError",
    "NullOrMissingInputError",
    "CapacityExceededError",
    "UnrecognizedCharacterError",
    "UnrecognizedTokenError",
    "MismatchedBracketsError",
    "StackUnderflowError",
    "InvalidOperandError",
    "DivisionByZeroError",
    "MalformedExpressionError",
]
