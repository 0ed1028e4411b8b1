import regex as re
from enum import IntEnum, StrEnum
from functools import lru_cache
from types import MappingProxyType

from .errors import UnrecognizedTokenError


class Operator(StrEnum):
    """
    Operators understood by the calculator.

    Attributes:
        ADD: Addition `+`
        SUB: Subtraction `-`
        MUL: Multiplication `*`
        DIV: Division `/`
        POW: Exponentiation `^`
        FACT: Factorial `!` (unary, postfix)
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    FACT = "!"

    @property
    def ordinal(self) -> int:
        return _OPERATOR_INDEX[self]


class Function(StrEnum):
    """
    Unary prefix functions. Inverse trigonometric functions have an `arc` alias.
    """

    SQRT = "sqrt"
    LOG = "log"
    LN = "ln"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COSH = "cosh"
    SINH = "sinh"
    TANH = "tanh"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    ARCSIN = "arcsin"
    ARCCOS = "arccos"
    ARCTAN = "arctan"

    @property
    def ordinal(self) -> int:
        return _FUNCTION_INDEX[self]


class Precedence(IntEnum):
    """
    Binding strength, lower value binds tighter.
    """

    FUNCTION = 1
    FACTORIAL = 2
    POWER = 3
    PRODUCT = 4
    SUM = 5


class TokenKind(StrEnum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    BRACKET = "bracket"


_OPERATOR_INDEX = MappingProxyType({op: i for i, op in enumerate(Operator)})
_FUNCTION_INDEX = MappingProxyType({fn: i for i, fn in enumerate(Function)})
_OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)
_FUNCTION_NAMES = frozenset(fn.value for fn in Function)

OPERATOR_PRECEDENCE = MappingProxyType(
    {
        Operator.FACT: Precedence.FACTORIAL,
        Operator.POW: Precedence.POWER,
        Operator.MUL: Precedence.PRODUCT,
        Operator.DIV: Precedence.PRODUCT,
        Operator.ADD: Precedence.SUM,
        Operator.SUB: Precedence.SUM,
    }
)

RIGHT_ASSOCIATIVE = frozenset({Operator.POW, Operator.FACT})

# opening bracket -> closing bracket
BRACKET_PAIRS = MappingProxyType({"(": ")", "[": "]", "{": "}"})
OPEN_BRACKETS = frozenset(BRACKET_PAIRS.keys())
CLOSE_BRACKETS = frozenset(BRACKET_PAIRS.values())

SINGLE_CHAR_TOKENS = frozenset(
    [op.value for op in Operator] + list(OPEN_BRACKETS) + list(CLOSE_BRACKETS)
)

_NUMBER_PATTERN = re.compile(r"^[+\-]?(?:\d[\d.]*|\.\d[\d.]*)$")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z]+$")


@lru_cache
def is_operator(token: str) -> bool:
    return token in _OPERATOR_SYMBOLS


@lru_cache
def is_function(token: str) -> bool:
    return token in _FUNCTION_NAMES


@lru_cache
def is_number(token: str) -> bool:
    """Check if a token string looks like a number literal (not whether it parses)."""
    return _NUMBER_PATTERN.match(token) is not None


def is_open_bracket(token: str) -> bool:
    return token in OPEN_BRACKETS


def is_close_bracket(token: str) -> bool:
    return token in CLOSE_BRACKETS


@lru_cache
def classify_token(token: str) -> TokenKind:
    """
    Tell which kind of token a string is, from its leading character(s).

    Raises:
        UnrecognizedTokenError: If the token fits none of the kinds.
    """
    if is_number(token):
        return TokenKind.NUMBER
    if is_operator(token):
        return TokenKind.OPERATOR
    if token in OPEN_BRACKETS or token in CLOSE_BRACKETS:
        return TokenKind.BRACKET
    if _IDENTIFIER_PATTERN.match(token):
        return TokenKind.IDENTIFIER
    raise UnrecognizedTokenError(f"classify_token: '{token}' is not a token.")


def which_operator(token: str) -> Operator:
    """
    Look up an operator by its symbol.

    Raises:
        UnrecognizedTokenError: If the token is not an operator.
    """
    if not is_operator(token):
        raise UnrecognizedTokenError(f"which_operator: '{token}' is not an operator.")
    return Operator(token)


def which_function(token: str) -> Function:
    """
    Look up a function by its name.

    Raises:
        UnrecognizedTokenError: If the token is not a known function name.
    """
    if not is_function(token):
        raise UnrecognizedTokenError(f"which_function: '{token}' is not a function.")
    return Function(token)


def precedence_of(token: str) -> Precedence:
    """
    Return the precedence level of an operator or function token.

    Raises:
        UnrecognizedTokenError: If the token is neither an operator nor a function.
    """
    if is_function(token):
        return Precedence.FUNCTION
    if is_operator(token):
        return OPERATOR_PRECEDENCE[Operator(token)]
    raise UnrecognizedTokenError(
        f"precedence_of: '{token}' is neither an operator nor a function."
    )


def is_right_associative(token: str) -> bool:
    """
    Check if an operator or function token groups right to left.

    Raises:
        UnrecognizedTokenError: If the token is neither an operator nor a function.
    """
    if is_operator(token):
        return Operator(token) in RIGHT_ASSOCIATIVE
    if is_function(token):
        return False
    raise UnrecognizedTokenError(
        f"is_right_associative: '{token}' is neither an operator nor a function."
    )
