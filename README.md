# alienwar

Building blocks for a battle between an Earth army and an alien army.

The Earth army is made of soldiers, tanks, gunnery units and heal units. The
alien army is made of soldiers, monsters and drones. Each kind of unit has its
own way of attacking. The package provides the containers that hold the
units, the units themselves and the two armies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `alienwar.structures` holds the general containers:
  - `LinkedQueue` is a first-in first-out queue that can also be used at both
    ends (`enqueue`, `enqueue_front`, `dequeue`, `dequeue_rear`, `peek`).
  - `ArrayStack` is a stack with a fixed capacity, 100 by default. `push`
    raises `OverflowError` when the stack is full.
  - `PriorityQueue` gives up the highest priority first. Entries of equal
    priority keep their arrival order. `dequeue` and `peek` return
    `(item, priority)`.
  - The helpers are `reversed_stack`, which returns a reversed copy,
    `remove_negatives`, `remove_leading_zeros` and `queue_sum`.

  Taking an item from an empty container raises `IndexError`.
- `alienwar.containers` holds `UnitQueue` and `UnitStack`. These are labelled
  containers of units. They compare equal when they hold equal units in the
  same order. `render()` returns a line such as `ES  2    [ 0, 1, ]`.
- `alienwar.ranked` holds two more containers:
  - `GunneryQueue` holds gunnery units ordered by priority.
  - `MonsterArray` keeps monsters in insertion order. `remove_random()`
    removes a monster chosen at random. You can pass it a `random.Random`.
- `alienwar.units` holds `Unit` and its kinds: `EarthSoldier`, `EarthTank`,
  `EarthGunnery`, `HealUnit`, `AlienSoldier`, `AlienMonster` and
  `AlienDrone`.
  - A unit has `health`, `power`, `id`, `attack_capacity` and `join_time`.
  - `damage_to(target)` gives the value that a hit sets the target's health
    to. It uses the attacker's health in whole hundreds, so an attacker with
    less than 100 health strikes for 0.
  - A heal unit never attacks.
- `alienwar.armies` holds the two armies:
  - `AlienArmy` keeps `soldiers`, `drones` and `monsters`.
  - `EarthArmy` keeps `soldiers`, `tanks`, `gunneries` and `heal_units`.
  - `render()` lists each army's alive units.
  - `attack()` sends one unit of each fighting kind into battle.

## Example

```python
import random

from alienwar.structures import ArrayStack, PriorityQueue, reversed_stack
from alienwar.ranked import MonsterArray

queue = PriorityQueue()
queue.enqueue("scout", 1)
queue.enqueue("cannon", 5)
queue.enqueue("mortar", 5)
print(queue.dequeue())  # ('cannon', 5)

stack = ArrayStack([1, 2, 3])
print(list(reversed_stack(stack)))  # [1, 2, 3]; the original pops 3, 2, 1

monsters = MonsterArray(["m1", "m2", "m3"], rng=random.Random(1))
print(monsters.remove_random(), len(monsters))
```

## Wiring units into a game

A unit's `attack()` works through the object passed as its `game`. That
object must provide:

- `out`, a text stream that the attack is written to
- `earth_army` and `alien_army`
- `add_to_killed(unit_id)`
- six holding queues: `earth_soldier_queue`, `earth_tank_queue`,
  `earth_gunnery_queue`, `alien_soldier_queue`, `alien_drone_queue` and
  `alien_monster_queue`

`EarthArmy` writes its fighting header to the stream passed as `out`, or to
standard output when none is passed.

## What the package does not do

The package has no command to run a battle. It does not read battle
parameters from an input file. It does not generate units at random. It has
no game object that ties the armies together, keeps the killed list or
prints a whole battle. A program that wants a full battle has to build the
units and armies itself and supply the game object described above.