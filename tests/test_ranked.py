from dataclasses import dataclass

import pytest

from alienwar.ranked import GunneryQueue, MonsterArray


@dataclass
class FakeUnit:
    id: int


class FixedRng:
    def __init__(self, index):
        self.index = index
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return self.index


def test_gunnery_dequeues_highest_priority_first():
    queue = GunneryQueue()
    low, high, mid = FakeUnit(1), FakeUnit(2), FakeUnit(3)
    queue.enqueue(low, 10)
    queue.enqueue(high, 90)
    queue.enqueue(mid, 50)
    assert [queue.dequeue() for _ in range(3)] == [high, mid, low]
    assert queue.is_empty()


def test_gunnery_equal_priorities_keep_arrival_order():
    queue = GunneryQueue()
    units = [FakeUnit(i) for i in range(4)]
    for unit in units:
        queue.enqueue(unit, 7)
    assert list(queue) == units


def test_gunnery_dequeue_empty_raises():
    with pytest.raises(IndexError):
        GunneryQueue().dequeue()


def test_gunnery_render_does_not_change_queue():
    queue = GunneryQueue()
    queue.enqueue(FakeUnit(4), 1)
    queue.enqueue(FakeUnit(8), 5)
    before = list(queue)
    text = queue.render()
    assert text == "EG  2    [ 8, 4, ]"
    assert list(queue) == before
    assert len(queue) == 2


def test_gunnery_len_tracks_operations():
    queue = GunneryQueue()
    queue.enqueue(FakeUnit(1), 3)
    queue.enqueue(FakeUnit(2), 3)
    queue.dequeue()
    assert len(queue) == 1


def test_monster_add_keeps_order():
    array = MonsterArray()
    monsters = [FakeUnit(i) for i in range(5)]
    for monster in monsters:
        array.add(monster)
    assert list(array) == monsters
    assert len(array) == len(monsters)


def test_monster_get_in_and_out_of_range():
    monsters = [FakeUnit(10), FakeUnit(20)]
    array = MonsterArray(monsters)
    assert array.get(1) is monsters[1]
    assert array.get(2) is None
    assert array.get(-1) is None


def test_monster_remove_random_uses_rng_index():
    monsters = [FakeUnit(i) for i in range(4)]
    rng = FixedRng(1)
    array = MonsterArray(monsters, rng=rng)
    removed = array.remove_random()
    assert removed is monsters[1]
    assert rng.calls == [4]
    assert list(array) == [monsters[0], monsters[2], monsters[3]]


def test_monster_remove_random_empties_array():
    import random

    monsters = [FakeUnit(i) for i in range(6)]
    array = MonsterArray(monsters, rng=random.Random(3))
    removed = [array.remove_random() for _ in range(6)]
    assert sorted(m.id for m in removed) == [m.id for m in monsters]
    assert len(array) == 0


def test_monster_remove_from_empty_raises():
    with pytest.raises(IndexError):
        MonsterArray().remove_random()


def test_monster_render():
    array = MonsterArray([FakeUnit(5001), FakeUnit(5002)])
    assert array.render() == "AM  2    [ 5001, 5002, ]"