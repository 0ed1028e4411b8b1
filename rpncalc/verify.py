import logging
from typing import Sequence

from .symbols import Operator, is_function, is_number, is_operator

logger = logging.getLogger(__name__)


def verify_postfix(postfix: Sequence[str]) -> bool:
    """
    Verify if a postfix sequence is well formed, without evaluating it.

    Only the stack effect of every token is checked, so a sequence that passes
    may still fail in `evaluate` with a domain error such as division by zero.
    """
    try:
        if postfix is None:
            raise ValueError("No postfix expression given.")

        stack_size = 0

        for i, token in enumerate(postfix):
            if is_number(token):
                stack_size += 1
                continue

            if token == Operator.FACT or is_function(token):
                if stack_size < 1:
                    raise ValueError(
                        f"{i}th token '{token}' requires 1 argument, but stack has {stack_size}."
                    )
                continue

            if is_operator(token):
                if stack_size < 2:
                    raise ValueError(
                        f"{i}th token '{token}' requires 2 arguments, but stack has {stack_size}."
                    )
                stack_size -= 1
                continue

            raise ValueError(f"{i}th token '{token}' is unknown.")

        if stack_size != 1:
            raise ValueError(
                f"Expression left {stack_size} items on the stack, but 1 was expected."
            )
        return True
    except ValueError as e:
        logger.warning("verify_postfix: %s", e)
        return False
