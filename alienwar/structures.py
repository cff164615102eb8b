"""Queue, stack and priority-queue containers used by the simulation."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_STACK_CAPACITY = 100


class LinkedQueue(Generic[T]):
    """First-in first-out queue that also allows access at both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        self._items.append(item)

    def enqueue_front(self, item: T) -> None:
        """Add an item at the front."""
        self._items.appendleft(item)

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def dequeue_rear(self) -> T:
        """Remove and return the back item."""
        if not self._items:
            raise IndexError("dequeue_rear from an empty queue")
        return self._items.pop()

    def peek(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class ArrayStack(Generic[T]):
    """Last-in first-out stack with a fixed capacity."""

    def __init__(self, items: Iterable[T] = (), capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Put an item on top; raises OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom, the order in which items would be popped."""
        return iter(self._items[::-1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"


class PriorityQueue(Generic[T]):
    """Queue ordered by priority, highest first; equal priorities keep arrival order."""

    def __init__(self) -> None:
        self._keys: list[int] = []
        self._entries: list[tuple[T, int]] = []

    def enqueue(self, item: T, priority: int) -> None:
        """Insert an item behind every entry of greater or equal priority."""
        position = bisect_right(self._keys, -priority)
        self._keys.insert(position, -priority)
        self._entries.insert(position, (item, priority))

    def dequeue(self) -> tuple[T, int]:
        """Remove and return the highest-priority entry as (item, priority)."""
        if not self._entries:
            raise IndexError("dequeue from an empty priority queue")
        self._keys.pop(0)
        return self._entries.pop(0)

    def peek(self) -> tuple[T, int]:
        """Return the highest-priority entry as (item, priority) without removing it."""
        if not self._entries:
            raise IndexError("peek at an empty priority queue")
        return self._entries[0]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Iterate over (item, priority) pairs in dequeue order."""
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


def reversed_stack(stack: ArrayStack[T]) -> ArrayStack[T]:
    """Return a new stack with the order reversed, leaving the original untouched."""
    return ArrayStack(iter(stack), capacity=stack.capacity)


def remove_negatives(stack: ArrayStack[int]) -> None:
    """Drop every negative item from the stack, keeping the others in order."""
    kept = [item for item in reversed(list(stack)) if item >= 0]
    while not stack.is_empty():
        stack.pop()
    for item in kept:
        stack.push(item)


def remove_leading_zeros(queue: LinkedQueue[int]) -> None:
    """Dequeue zeros from the front until a non-zero item or the end is reached."""
    while not queue.is_empty() and queue.peek() == 0:
        queue.dequeue()


def queue_sum(queue: LinkedQueue[int]) -> int:
    """Return the sum of the queue's items without changing the queue."""
    return sum(queue)