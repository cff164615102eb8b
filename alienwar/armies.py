"""The two armies and the containers each keeps its units in."""

from __future__ import annotations

import random
import sys
from typing import Any, TextIO

from alienwar.containers import UnitQueue, UnitStack
from alienwar.ranked import GunneryQueue, MonsterArray

_RULE = "=" * 41
ALIEN_HEADER = f"{_RULE}Alive Alien Army units{_RULE}"
EARTH_HEADER = f"{_RULE}Alive Earth Army units{_RULE}"
FIGHT_HEADER = f"{'=' * 37}Units fighting at current step{'=' * 35}"


class AlienArmy:
    """Alien soldiers in a queue, drones in a double-ended queue, monsters in an array."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.soldiers = UnitQueue("AS")
        self.drones = UnitQueue("AD")
        self.monsters = MonsterArray(rng=rng)

    def add_soldier(self, unit: Any) -> None:
        self.soldiers.enqueue(unit)

    def add_monster(self, unit: Any) -> None:
        self.monsters.add(unit)

    def add_drone(self, unit: Any) -> None:
        self.drones.enqueue(unit)

    def render(self) -> str:
        """Return the listing of every alive alien unit."""
        return (
            f"{ALIEN_HEADER}\n\n"
            f"{self.soldiers.render()}\n\n"
            f"{self.drones.render()}\n\n"
            f"{self.monsters.render()}\n\n\n"
        )

    def attack(self) -> None:
        """Let the front soldier, a pair of drones and a random monster attack.

        Raises IndexError when there is no soldier or no monster to send.
        """
        self.soldiers.dequeue().attack()
        if len(self.drones) >= 2:
            self.drones.dequeue().attack()
            self.drones.dequeue_rear().attack()
        self.monsters.remove_random().attack()


class EarthArmy:
    """Earth soldiers in a queue, tanks and heal units in stacks, gunneries by priority."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.soldiers = UnitQueue("ES")
        self.gunneries = GunneryQueue()
        self.tanks = UnitStack("ET")
        self.heal_units = UnitStack("HU")
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def add_soldier(self, unit: Any) -> None:
        self.soldiers.enqueue(unit)

    def add_gunnery(self, unit: Any, priority: int) -> None:
        self.gunneries.enqueue(unit, priority)

    def add_tank(self, unit: Any) -> None:
        self.tanks.push(unit)

    def add_heal_unit(self, unit: Any) -> None:
        self.heal_units.push(unit)

    def render(self) -> str:
        """Return the listing of the alive fighting earth units."""
        return (
            f"{EARTH_HEADER}\n\n"
            f"{self.soldiers.render()}\n\n"
            f"{self.tanks.render()}\n\n"
            f"{self.gunneries.render()}\n\n"
        )

    def attack(self) -> None:
        """Let the front soldier, the top tank and the strongest gunnery attack.

        Raises IndexError when any of the three containers is empty.
        """
        self.out.write(f"{FIGHT_HEADER}\n\n")
        self.soldiers.dequeue().attack()
        self.tanks.pop().attack()
        self.gunneries.dequeue().attack()