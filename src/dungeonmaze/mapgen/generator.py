# src/dungeonmaze/mapgen/generator.py
# Stage generator: solid grid -> rooms -> maze.

import logging as log
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import StageConfig
from ..grid import Grid
from ..rng import PMRandom, make_rng
from .maze import CarveHook, fill_maze
from .rooms import Room, add_rooms


@dataclass
class Stage:
    grid: Grid
    rooms: List[Room] = field(default_factory=list)
    carve_steps: int = 0
    seed: Optional[int] = None


def generate_stage(
    config: StageConfig,
    rng: Optional[PMRandom] = None,
    on_carve: Optional[CarveHook] = None,
) -> Stage:
    if rng is None:
        rng = make_rng(config.seed)
    seed = rng.state

    grid = Grid.solid(config.width, config.height)
    rooms = add_rooms(grid, rng, config.room_fill_rate)
    steps = fill_maze(grid, rng, on_carve=on_carve)

    log.debug(
        f"Stage {grid.width}x{grid.height} seed={seed}: "
        f"{len(rooms)} rooms, {steps} carve steps, {grid.empty_count()} open tiles"
    )
    return Stage(grid=grid, rooms=rooms, carve_steps=steps, seed=seed)
