from typing import Sequence

from .errors import MalformedExpressionError, NullOrMissingInputError, UnrecognizedTokenError
from .symbols import Operator, is_function, is_number, is_operator


def _is_grouped(text: str) -> bool:
    """Check if text is wrapped in a single pair of matching parentheses."""
    if not (text.startswith("(") and text.endswith(")")):
        return False
    depth = 0
    for pos, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and pos != len(text) - 1:
                return False
    return True


def postfix2infix(postfix: Sequence[str]) -> str:
    """
    Convert a postfix token sequence back to a fully parenthesized infix string.

    Args:
        postfix: Postfix tokens, e.g. `["3", "4", "+", "2", "*"]`.

    Returns:
        Infix code, e.g. `"((3 + 4) * 2)"`. Feeding it back through `tokenize`
        and `infix2postfix` reproduces the same postfix sequence.

    Raises:
        NullOrMissingInputError: If postfix is None.
        MalformedExpressionError: On stack underflow or leftover operands.
        UnrecognizedTokenError: On a token that is not a number, operator or function.
    """
    if postfix is None:
        raise NullOrMissingInputError("postfix2infix: no postfix expression given.")

    stack: list[str] = []

    for i, token in enumerate(postfix):

        def pop() -> str:
            try:
                return stack.pop()
            except IndexError:
                raise MalformedExpressionError(
                    f"postfix2infix: Stack Underflow at {i}th token '{token}'.", i
                )

        if is_number(token):
            stack.append(token)
        elif token == Operator.FACT:
            a = pop()
            unsigned_number = is_number(a) and a[0] not in "+-"
            stack.append(f"{a}!" if unsigned_number or _is_grouped(a) else f"({a})!")
        elif is_operator(token):
            b = pop()
            a = pop()
            stack.append(f"({a} {token} {b})")
        elif is_function(token):
            a = pop()
            stack.append(f"{token}{a}" if _is_grouped(a) else f"{token}({a})")
        else:
            raise UnrecognizedTokenError(
                f"postfix2infix: unrecognized {i}th token '{token}'.", i
            )

    if len(stack) != 1:
        raise MalformedExpressionError(
            f"postfix2infix: Expression left {len(stack)} items on the stack, but 1 was expected."
        )
    return stack[0]
