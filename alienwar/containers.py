"""Labelled unit containers: a double-ended unit queue and a bounded unit stack."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from alienwar.structures import DEFAULT_STACK_CAPACITY, ArrayStack, LinkedQueue


def _render_ids(label: str, units: Iterable[Any], count: int) -> str:
    ids = "".join(f"{unit.id}, " for unit in units)
    return f"{label}  {count}    [ {ids}]"


class UnitQueue:
    """First-in first-out queue of units with access at both ends."""

    def __init__(self, label: str = "", units: Iterable[Any] = ()) -> None:
        self.label = label
        self._queue: LinkedQueue[Any] = LinkedQueue(units)

    def enqueue(self, unit: Any) -> None:
        """Add a unit at the back."""
        self._queue.enqueue(unit)

    def enqueue_front(self, unit: Any) -> None:
        """Add a unit at the front."""
        self._queue.enqueue_front(unit)

    def dequeue(self) -> Any:
        """Remove and return the front unit; raises IndexError when empty."""
        return self._queue.dequeue()

    def dequeue_rear(self) -> Any:
        """Remove and return the back unit; raises IndexError when empty."""
        return self._queue.dequeue_rear()

    def peek(self) -> Any:
        """Return the front unit without removing it; raises IndexError when empty."""
        return self._queue.peek()

    def is_empty(self) -> bool:
        return self._queue.is_empty()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._queue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitQueue):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def render(self) -> str:
        """Return the label, the count and the unit ids from front to back."""
        return _render_ids(self.label, self, len(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, {list(self)!r})"


class UnitStack:
    """Last-in first-out stack of units with a fixed capacity."""

    def __init__(
        self,
        label: str = "",
        units: Iterable[Any] = (),
        capacity: int = DEFAULT_STACK_CAPACITY,
    ) -> None:
        self.label = label
        self._stack: ArrayStack[Any] = ArrayStack(units, capacity=capacity)

    @property
    def capacity(self) -> int:
        return self._stack.capacity

    def push(self, unit: Any) -> None:
        """Put a unit on top; raises OverflowError when the stack is full."""
        self._stack.push(unit)

    def pop(self) -> Any:
        """Remove and return the top unit; raises IndexError when empty."""
        return self._stack.pop()

    def peek(self) -> Any:
        """Return the top unit without removing it; raises IndexError when empty."""
        return self._stack.peek()

    def is_empty(self) -> bool:
        return self._stack.is_empty()

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return iter(self._stack)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitStack):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def render(self) -> str:
        """Return the label, the count and the unit ids from top to bottom."""
        return _render_ids(self.label, self, len(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, {list(self)!r})"