"""Fighting units of both armies and the way each one attacks."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar


class UnitKind(Enum):
    """The kinds of unit that take part in the war."""

    EARTH_SOLDIER = "ES"
    EARTH_TANK = "ET"
    EARTH_GUNNERY = "EG"
    HEAL_UNIT = "HU"
    ALIEN_SOLDIER = "AS"
    ALIEN_MONSTER = "AM"
    ALIEN_DRONE = "AD"


@dataclass(eq=True)
class Unit(ABC):
    """A unit with health, power and attack capacity, bound to the game it plays in.

    The game supplies ``out``, ``earth_army``, ``alien_army``, ``add_to_killed``
    and the six holding queues ``earth_soldier_queue``, ``earth_tank_queue``,
    ``earth_gunnery_queue``, ``alien_soldier_queue``, ``alien_drone_queue`` and
    ``alien_monster_queue``.
    """

    health: int
    power: int
    id: int
    attack_capacity: int
    join_time: int
    game: Any = field(default=None, compare=False, repr=False)

    kind: ClassVar[UnitKind]

    def damage_to(self, target: "Unit") -> int:
        """Return the strike value against target; a hit sets the target's health to it."""
        if target.health <= 0:
            return 0
        return int(self.power * (self.health // 100) / math.sqrt(target.health))

    @abstractmethod
    def attack(self) -> None:
        """Strike the enemy units this kind of unit targets."""

    def _write(self, text: str) -> None:
        self.game.out.write(text)

    def _strike(self, target: "Unit", put_back: Callable[["Unit"], None], sep: str = ", ") -> None:
        target.health = self.damage_to(target)
        self._write(f"{target.id}{sep}")
        if target.health <= 0:
            self.game.add_to_killed(target.id)
        else:
            put_back(target)


@dataclass(eq=True)
class EarthSoldier(Unit):
    """Earth infantry; attacks alien soldiers."""

    kind: ClassVar[UnitKind] = UnitKind.EARTH_SOLDIER

    def attack(self) -> None:
        game = self.game
        aliens = game.alien_army.soldiers
        self._write(f"ES   {self.id}    [ ")

        def put_back(unit: Unit) -> None:
            if game.alien_soldier_queue.is_empty():
                game.alien_soldier_queue.enqueue(unit)
            else:
                aliens.enqueue(unit)

        for _ in range(self.attack_capacity):
            if len(aliens) > 0:
                self._strike(aliens.dequeue(), put_back)
        self._write("]\n")
        game.earth_soldier_queue.enqueue(self)


@dataclass(eq=True)
class EarthTank(Unit):
    """Earth tank; attacks alien monsters."""

    kind: ClassVar[UnitKind] = UnitKind.EARTH_TANK

    def attack(self) -> None:
        game = self.game
        monsters = game.alien_army.monsters
        self._write(f"ET  {self.id}  [ ")
        for _ in range(self.attack_capacity):
            if len(monsters) > 0:
                self._strike(monsters.remove_random(), game.alien_monster_queue.enqueue)
        self._write("]\n")
        game.earth_tank_queue.enqueue(self)


@dataclass(eq=True)
class EarthGunnery(Unit):
    """Earth gunnery; attacks alien monsters and pairs of drones."""

    hp_combined: int = field(init=False, compare=False)

    kind: ClassVar[UnitKind] = UnitKind.EARTH_GUNNERY

    def __post_init__(self) -> None:
        self.hp_combined = self.health + self.power

    def attack(self) -> None:
        game = self.game
        monsters = game.alien_army.monsters
        drones = game.alien_army.drones
        self._write(f"EG  {self.id}  [ ")
        for _ in range(self.attack_capacity):
            if len(monsters) > 0:
                self._strike(monsters.remove_random(), game.alien_monster_queue.enqueue)
            if len(drones) >= 2:
                rear = drones.dequeue_rear()
                front = drones.dequeue()
                self._strike(rear, game.alien_drone_queue.enqueue)
                self._strike(front, game.alien_drone_queue.enqueue)
        self._write("]\n\n")
        game.earth_gunnery_queue.enqueue(self)


@dataclass(eq=True)
class HealUnit(Unit):
    """Earth heal unit; it takes no part in the fighting."""

    kind: ClassVar[UnitKind] = UnitKind.HEAL_UNIT

    def attack(self) -> None:
        """Heal units do not strike anyone."""
        return None


@dataclass(eq=True)
class AlienSoldier(Unit):
    """Alien infantry; attacks earth soldiers."""

    kind: ClassVar[UnitKind] = UnitKind.ALIEN_SOLDIER

    def attack(self) -> None:
        game = self.game
        defenders = game.earth_army.soldiers
        self._write(f"AS  {self.id}   [ ")
        strikes = self.attack_capacity
        if not game.earth_soldier_queue.is_empty():
            self._strike(game.earth_soldier_queue.dequeue(), defenders.enqueue, sep=",")
            strikes -= 1
        for _ in range(strikes):
            if len(defenders) > 0:
                self._strike(defenders.dequeue(), defenders.enqueue)
        self._write("]\n")
        game.alien_army.soldiers.enqueue(self)


@dataclass(eq=True)
class AlienMonster(Unit):
    """Alien monster; attacks earth soldiers and tanks.

    Each round it strikes the top earth tank, so attacking with no tank left
    raises IndexError.
    """

    kind: ClassVar[UnitKind] = UnitKind.ALIEN_MONSTER

    def attack(self) -> None:
        game = self.game
        soldiers = game.earth_army.soldiers
        tanks = game.earth_army.tanks
        self._write(f"AM   {self.id}    [ ")
        strikes = self.attack_capacity
        if not game.earth_tank_queue.is_empty():
            if len(game.earth_soldier_queue) > 0 and len(game.earth_tank_queue) > 0:
                self._strike(game.earth_soldier_queue.dequeue(), soldiers.enqueue)
                self._strike(game.earth_tank_queue.dequeue(), tanks.push)
            strikes -= 1
        for _ in range(strikes):
            if len(soldiers) > 0 and len(tanks) > 0:
                self._strike(soldiers.dequeue(), soldiers.enqueue)
            self._strike(tanks.pop(), tanks.push)
        self._write("]\n\n")
        game.alien_army.monsters.add(self)


@dataclass(eq=True)
class AlienDrone(Unit):
    """Alien drone; attacks earth tanks and gunneries in pairs."""

    kind: ClassVar[UnitKind] = UnitKind.ALIEN_DRONE

    def attack(self) -> None:
        game = self.game
        tanks = game.earth_army.tanks
        gunneries = game.earth_army.gunneries

        def requeue_gunnery(unit: Unit) -> None:
            gunneries.enqueue(unit, unit.health + unit.power)

        self._write(f"AD   {self.id}  [ ")
        strikes = self.attack_capacity
        if not game.earth_gunnery_queue.is_empty():
            if len(game.earth_tank_queue) > 0 and len(game.earth_gunnery_queue) > 0:
                tank = game.earth_tank_queue.dequeue()
                gunnery = game.earth_gunnery_queue.dequeue()
                self._strike(tank, tanks.push)
                self._strike(gunnery, requeue_gunnery)
            strikes -= 1
        for _ in range(strikes):
            if len(tanks) > 0 and len(gunneries) > 0:
                tank = tanks.pop()
                gunnery = gunneries.dequeue()
                self._strike(tank, tanks.push)
                self._strike(gunnery, requeue_gunnery)
        self._write("]\n")