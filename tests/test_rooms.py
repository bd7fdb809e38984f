# tests/test_rooms.py
import pytest

from dungeonmaze.grid import Grid
from dungeonmaze.mapgen.rooms import (
    MAX_ROOM_ATTEMPTS, Room, add_rooms, carve_room, fill_target, random_room, room_fits
)
from dungeonmaze.rng import PMRandom

class ScriptedRandom:
    """Replays a fixed list of intn results, cycling."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0
    def intn(self, n):
        v = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert 0 <= v < n
        return v

def test_room_geometry():
    r = Room(width=4, height=4, x=2, y=2)
    assert r.area == 16
    cells = set(r.cells())
    assert len(cells) == 25
    assert (2, 2) in cells and (6, 6) in cells and (7, 7) not in cells
    assert len(set(r.padded_cells())) == 49

def test_random_room_extents_are_even():
    g = Grid.solid(79, 21)
    rng = PMRandom.from_seed(11)
    for _ in range(500):
        r = random_room(g, rng)
        assert r.width % 2 == 0 and 4 <= r.width < 16
        assert r.height % 2 == 0 and 4 <= r.height < 12
        assert r.x % 2 == 0 and 2 <= r.x <= 80
        assert r.y % 2 == 0 and 2 <= r.y <= 22

def test_room_fits_checks_bounds_and_padding():
    g = Grid.solid(9, 9)
    assert room_fits(g, Room(4, 4, 2, 2))
    assert room_fits(g, Room(4, 4, 4, 4))      # padding may sit on the rim
    assert not room_fits(g, Room(4, 4, 6, 2))  # runs past the right edge
    carve_room(g, Room(4, 4, 2, 2))
    assert not room_fits(g, Room(4, 4, 4, 4))

def test_fill_target():
    assert fill_target(Grid.solid(79, 21), 20) == 79 * 21 * 20 // 100
    assert fill_target(Grid.solid(3, 3), 10) == 0

def test_zero_fill_places_nothing():
    g = Grid.solid(21, 21)
    assert add_rooms(g, PMRandom.from_seed(1), 0) == []
    assert g.empty_count() == 0

def test_scripted_room_is_carved_then_budget_stops():
    g = Grid.solid(9, 9)
    rng = ScriptedRandom([1])  # w=4, h=4, x=2, y=2 every time
    rooms = add_rooms(g, rng, 30, max_attempts=2)
    assert rooms == [Room(4, 4, 2, 2)]
    assert g.empty_count() == 25
    assert rng.calls == 8

def test_invalid_fill_rate():
    with pytest.raises(ValueError):
        add_rooms(Grid.solid(9, 9), PMRandom.from_seed(1), 150)

def test_rooms_never_touch():
    for seed in (1, 2, 3, 4, 5):
        g = Grid.solid(79, 21)
        rooms = add_rooms(g, PMRandom.from_seed(seed), 60)
        assert rooms
        for a in rooms:
            for b in rooms:
                if a is b:
                    continue
                assert not set(a.cells()) & set(b.padded_cells())

def test_rooms_stay_inside_rim():
    g = Grid.solid(31, 15)
    add_rooms(g, PMRandom.from_seed(8), 100)
    for t in g.tiles():
        if g.is_edge(t.x, t.y):
            assert not t.empty

def test_full_fill_terminates_on_budget():
    g = Grid.solid(15, 15)
    rng = PMRandom.from_seed(3)
    rooms = add_rooms(g, rng, 100)
    # the rim is never carved, so the target cannot be met
    assert sum(r.area for r in rooms) < fill_target(g, 100)
    assert len(rooms) >= 1
    assert MAX_ROOM_ATTEMPTS == 10000
