"""Generic LIFO stack used by the expression parser."""
from typing import Generic, List, TypeVar

T = TypeVar("T")


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack(Generic[T]):
    """
    Last-in, first-out container.

    Only the top of the stack is reachable: items are pushed on top and
    popped from the top.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        :return: The most recently pushed item
        :raises StackUnderflowError: If the stack is empty
        """
        if not self._items:
            raise StackUnderflowError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """
        Return the top item without removing it.

        :raises StackUnderflowError: If the stack is empty
        """
        if not self._items:
            raise StackUnderflowError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
