"""Priority-ordered gunnery queue and the randomly drawn monster array."""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator

from alienwar.structures import PriorityQueue


def _render_line(label: str, units: Iterable[Any], count: int) -> str:
    ids = "".join(f"{unit.id}, " for unit in units)
    return f"{label}  {count}    [ {ids}]"


class GunneryQueue:
    """Gunnery units ordered by priority, highest first; ties keep arrival order."""

    label = "EG"

    def __init__(self) -> None:
        self._queue: PriorityQueue[Any] = PriorityQueue()

    def enqueue(self, unit: Any, priority: int) -> None:
        """Insert a unit with the given priority."""
        self._queue.enqueue(unit, priority)

    def dequeue(self) -> Any:
        """Remove and return the highest-priority unit; raises IndexError when empty."""
        unit, _ = self._queue.dequeue()
        return unit

    def is_empty(self) -> bool:
        return self._queue.is_empty()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the units in dequeue order."""
        return (unit for unit, _ in self._queue)

    def render(self) -> str:
        """Return the label, the count and the unit ids in dequeue order."""
        return _render_line(self.label, self, len(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._queue)!r})"


class MonsterArray:
    """Monsters kept in insertion order; removal picks one at random."""

    label = "AM"

    def __init__(self, monsters: Iterable[Any] = (), rng: random.Random | None = None) -> None:
        self._monsters: list[Any] = list(monsters)
        self._rng = rng if rng is not None else random.Random()

    def add(self, monster: Any) -> None:
        """Append a monster at the end."""
        self._monsters.append(monster)

    def remove_random(self) -> Any:
        """Remove and return a monster chosen at random; raises IndexError when empty."""
        if not self._monsters:
            raise IndexError("remove from an empty monster array")
        return self._monsters.pop(self._rng.randrange(len(self._monsters)))

    def get(self, index: int) -> Any | None:
        """Return the monster at index, or None when the index is out of range."""
        if 0 <= index < len(self._monsters):
            return self._monsters[index]
        return None

    def __len__(self) -> int:
        return len(self._monsters)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._monsters))

    def render(self) -> str:
        """Return the label, the count and the monster ids in stored order."""
        return _render_line(self.label, self, len(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._monsters!r})"