from typing import Generic, Optional, TypeVar

from .errors import CapacityExceededError, StackUnderflowError

T = TypeVar("T")

EMPTY_TOP = -1


class BoundedStack(Generic[T]):
    """
    Fixed-capacity LIFO container.

    Slots are allocated once at construction and never resized. `top` is the
    index of the topmost element, `EMPTY_TOP` when the stack holds nothing.

    Raises:
        CapacityExceededError: On `push` into a full stack.
        StackUnderflowError: On `pop` or `peek` from an empty stack.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"{type(self).__name__}: capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._top = EMPTY_TOP

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def top(self) -> int:
        return self._top

    def push(self, item: T) -> None:
        if self._top >= self._capacity - 1:
            raise CapacityExceededError(
                f"{type(self).__name__}.push: stack is full ({self._capacity} elements)."
            )
        self._top += 1
        self._slots[self._top] = item

    def pop(self) -> T:
        if self._top == EMPTY_TOP:
            raise StackUnderflowError(f"{type(self).__name__}.pop: stack is empty.")
        item = self._slots[self._top]
        self._slots[self._top] = None
        self._top -= 1
        return item

    def peek(self) -> T:
        if self._top == EMPTY_TOP:
            raise StackUnderflowError(f"{type(self).__name__}.peek: stack is empty.")
        return self._slots[self._top]

    def is_empty(self) -> bool:
        return self._top == EMPTY_TOP

    def clear(self) -> None:
        for i in range(self._top + 1):
            self._slots[i] = None
        self._top = EMPTY_TOP

    def __len__(self) -> int:
        return self._top + 1

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        items = self._slots[: self._top + 1]
        return f"{type(self).__name__}({items!r}, capacity={self._capacity})"


class OperatorStack(BoundedStack[str]):
    """Holds operator, function and opening bracket tokens during conversion."""


class ValueStack(BoundedStack[float]):
    """Holds operands during postfix evaluation."""
