# src/dungeonmaze/mapgen/rooms.py
# Room placement: random rectangles, rejected on overlap, carved until the
# requested share of the stage area is used up.

import logging as log
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..config import round_up_to_even
from ..grid import Grid
from ..rng import PMRandom

MAX_ROOM_ATTEMPTS = 10000
PADDING = 1

# Extents are drawn as intn(SPAN) + BASE, then rounded up to even.
ROOM_WIDTH_SPAN, ROOM_WIDTH_BASE = 12, 3    # even widths 4..14
ROOM_HEIGHT_SPAN, ROOM_HEIGHT_BASE = 8, 3   # even heights 4..10


@dataclass(frozen=True)
class Room:
    width: int
    height: int
    x: int
    y: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        # Borders are inclusive: x..x+width, y..y+height.
        for x in range(self.x, self.x + self.width + 1):
            for y in range(self.y, self.y + self.height + 1):
                yield x, y

    def padded_cells(self) -> Iterator[Tuple[int, int]]:
        for x in range(self.x - PADDING, self.x + self.width + PADDING + 1):
            for y in range(self.y - PADDING, self.y + self.height + PADDING + 1):
                yield x, y


def random_room(grid: Grid, rng: PMRandom) -> Room:
    return Room(
        width=round_up_to_even(rng.intn(ROOM_WIDTH_SPAN) + ROOM_WIDTH_BASE),
        height=round_up_to_even(rng.intn(ROOM_HEIGHT_SPAN) + ROOM_HEIGHT_BASE),
        x=round_up_to_even(rng.intn(grid.width) + 1),
        y=round_up_to_even(rng.intn(grid.height) + 1),
    )


def room_fits(grid: Grid, room: Room) -> bool:
    """Footprint plus its padding ring must be on the grid and still solid."""
    return all(grid.is_solid_at(x, y) for x, y in room.padded_cells())


def carve_room(grid: Grid, room: Room) -> None:
    for x, y in room.cells():
        grid.carve(x, y)


def fill_target(grid: Grid, fill_rate: int) -> int:
    return grid.width * grid.height * fill_rate // 100


def add_rooms(
    grid: Grid,
    rng: PMRandom,
    fill_rate: int,
    max_attempts: int = MAX_ROOM_ATTEMPTS,
) -> List[Room]:
    """
    Carve rooms until their summed area reaches fill_rate percent of the
    grid, or max_attempts candidates have been tried. Falling short of the
    target is a normal outcome, not an error.
    """
    if not (0 <= fill_rate <= 100):
        raise ValueError("fill_rate must be 0..100")
    volume_left = fill_target(grid, fill_rate)
    placed: List[Room] = []
    if volume_left == 0:
        return placed

    attempts = 0
    while attempts < max_attempts and volume_left > 0:
        attempts += 1
        room = random_room(grid, rng)
        if not room_fits(grid, room):
            continue
        carve_room(grid, room)
        placed.append(room)
        volume_left -= room.area

    if volume_left > 0:
        log.debug(f"Room budget exhausted: {len(placed)} rooms, {volume_left} area short")
    else:
        log.debug(f"Placed {len(placed)} rooms in {attempts} attempts")
    return placed
