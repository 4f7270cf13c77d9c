"""A bounded integer stack and a tiny command language driving it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

STACK_SIZE = 100


class StackError(Exception):
    """Raised on pushing to a full stack or popping from an empty one."""


class Stack:
    """A last-in first-out stack holding at most ``capacity`` integers."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Put x on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackError("stack overflow")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top of the stack."""
        if not self._items:
            raise StackError("stack underflow")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run 'PUSH n' and 'POP' commands until any other command.

    Returns the stack contents from top to bottom; raises StackError if any
    command overflowed or underflowed the stack.
    """
    stack = Stack()
    for command in commands:
        parts = command.split()
        if not parts:
            break
        op = parts[0]
        if op == "PUSH":
            if len(parts) < 2:
                raise ValueError("PUSH needs a number")
            stack.push(int(parts[1]))
        elif op == "POP":
            stack.pop()
        else:
            break
    return list(stack)