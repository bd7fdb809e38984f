# src/dungeonmaze/mapgen/maze.py
# Growing-tree maze carver. Works on the even lattice with step-2 moves and
# never enters a tile that is already open, so carved rooms stay intact.
#
#   Ex: we start at cell N, target cell M, and also clear the middle O
#   #####    #####    #####
#   #N###    #N#M#    #NOM#
#   #####    #####    #####

import logging as log
from typing import Callable, Iterable, List, NamedTuple, Optional, Set, Tuple

from ..config import round_up_to_even
from ..grid import Grid
from ..rng import PMRandom
from ..tiles import Tile

MAX_SEED_ATTEMPTS = 10000
MIN_MAZE_DIMENSION = 3

# 1 up, 2 right, 3 down, 4 left
DIRECTIONS = {
    1: (0, -2),
    2: (2, 0),
    3: (0, 2),
    4: (-2, 0),
}


class MazeSeedError(RuntimeError):
    """The grid is too small to hold a starting cell."""


class Move(NamedTuple):
    next_x: int
    next_y: int
    middle_x: int
    middle_y: int


CarveHook = Callable[[Grid, Move], None]


def is_lattice(x: int, y: int) -> bool:
    return x % 2 == 0 and y % 2 == 0


def can_enter(grid: Grid, x: int, y: int) -> bool:
    """A step-2 destination must exist, stay off the rim, and still be solid."""
    return grid.exists(x, y) and not grid.is_edge(x, y) and not grid.is_empty(x, y)


def has_move(grid: Grid, x: int, y: int) -> bool:
    return any(can_enter(grid, x + dx, y + dy) for dx, dy in DIRECTIONS.values())


def random_permutation(rng: PMRandom, start: int = 1, end: int = 5) -> List[int]:
    return rng.permutation(start, end)


def pick_origin(
    grid: Grid,
    rng: PMRandom,
    max_attempts: int = MAX_SEED_ATTEMPTS,
) -> Optional[Tile]:
    """
    Draw even-aligned coordinates until one lands on a solid tile. After
    max_attempts misses, fall back to a random pick among the solid lattice
    tiles. Returns None when the lattice has no solid tile at all; raises
    MazeSeedError for grids too small to hold an interior lattice cell.
    """
    if grid.width < MIN_MAZE_DIMENSION or grid.height < MIN_MAZE_DIMENSION:
        raise MazeSeedError(
            f"a {grid.width}x{grid.height} grid has no interior cell to start a maze from"
        )
    candidates = [
        (x, y)
        for y in range(2, grid.height + 1, 2)
        for x in range(2, grid.width + 1, 2)
        if grid.is_solid_at(x, y)
    ]
    if not candidates:
        return None

    for _ in range(max_attempts):
        x = round_up_to_even(rng.intn(grid.width))
        y = round_up_to_even(rng.intn(grid.height))
        if grid.is_solid_at(x, y):
            return grid.get(x, y)
    log.debug(f"No start cell hit in {max_attempts} draws, picking from {len(candidates)} candidates")
    x, y = candidates[rng.intn(len(candidates))]
    return grid.get(x, y)


def next_move(grid: Grid, tile: Tile, rng: PMRandom) -> Optional[Move]:
    for direction in random_permutation(rng):
        dx, dy = DIRECTIONS[direction]
        nx, ny = tile.x + dx, tile.y + dy
        if not can_enter(grid, nx, ny):
            continue
        return Move(nx, ny, tile.x + dx // 2, tile.y + dy // 2)
    return None


def fill_maze(grid: Grid, rng: PMRandom, on_carve: Optional[CarveHook] = None) -> int:
    """
    Growing tree: keep a list of carved cells, extend from a random member,
    drop members with nowhere left to go. Done when the list is empty.
    on_carve is called after every carve step and must not touch the grid.
    Returns the number of carve steps.
    """
    origin = pick_origin(grid, rng)
    if origin is None:
        log.debug("No solid lattice cell left for the maze")
        return 0
    grid.carve(origin.x, origin.y)

    frontier: List[Tile] = [origin]
    steps = 0
    while frontier:
        i = rng.intn(len(frontier))
        move = next_move(grid, frontier[i], rng)
        if move is None:
            del frontier[i]
            continue
        dest = grid.carve(move.next_x, move.next_y)
        grid.carve(move.middle_x, move.middle_y)
        frontier.append(dest)
        steps += 1
        if on_carve is not None:
            on_carve(grid, move)

    log.debug(f"Maze carved in {steps} steps from ({origin.x}, {origin.y})")
    return steps


def frontier_exhausted(grid: Grid, exclude: Iterable[Tuple[int, int]] = ()) -> bool:
    """True if no open lattice tile (outside exclude) could still be extended."""
    skip: Set[Tuple[int, int]] = set(exclude)
    for tile in grid.tiles():
        if not tile.empty or not is_lattice(tile.x, tile.y):
            continue
        if (tile.x, tile.y) in skip:
            continue
        if has_move(grid, tile.x, tile.y):
            return False
    return True
