#!/usr/bin/env python3
# Animated viewer for dungeonmaze stages.
# - Rooms appear first, then the maze is replayed one carve step per frame
# - R: regenerate with a fresh seed   SPACE: pause/resume   S: skip to end
# - ESC / window close: quit
# - Fixed frame rate (--fps)

import argparse
import pygame

from dungeonmaze.config import StageConfig
from dungeonmaze.grid import Grid
from dungeonmaze.mapgen.maze import fill_maze
from dungeonmaze.mapgen.rooms import add_rooms
from dungeonmaze.render.tileset import Tileset
from dungeonmaze.rng import make_rng


# ---------- recording ----------
def record_stage(config: StageConfig):
    """Return (grid with rooms only, ordered list of cells to open, final seed)."""
    rng = make_rng(config.seed)
    seed = rng.state
    grid = Grid.solid(config.width, config.height)
    add_rooms(grid, rng, config.room_fill_rate)
    rooms_only = grid.copy()

    moves = []
    fill_maze(grid, rng, on_carve=lambda g, m: moves.append(m))

    # The origin is the one maze cell not produced by a move.
    opened = {(m.next_x, m.next_y) for m in moves} | {(m.middle_x, m.middle_y) for m in moves}
    origin = [
        (t.x, t.y) for t in grid.tiles()
        if t.empty and not rooms_only.is_empty(t.x, t.y) and (t.x, t.y) not in opened
    ]
    steps = [origin]
    for m in moves:
        steps.append([(m.middle_x, m.middle_y), (m.next_x, m.next_y)])
    return rooms_only, steps, seed


# ---------- viewer ----------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=79)
    ap.add_argument("--height", type=int, default=21)
    ap.add_argument("--room_fill_rate", type=int, default=20)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--fps", type=int, default=50, help="Carve steps shown per second")
    args = ap.parse_args()

    config = StageConfig(width=args.width, height=args.height,
                         room_fill_rate=args.room_fill_rate, seed=args.seed)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((config.width * args.tile, config.height * args.tile))
    tiles = Tileset(args.tile)

    grid, steps, seed = record_stage(config)
    cursor = 0
    paused = False
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    config = StageConfig(width=config.width, height=config.height,
                                         room_fill_rate=config.room_fill_rate)
                    grid, steps, seed = record_stage(config)
                    cursor = 0
                elif ev.key == pygame.K_SPACE:
                    paused = not paused
                elif ev.key == pygame.K_s:
                    while cursor < len(steps):
                        for x, y in steps[cursor]:
                            grid.carve(x, y)
                        cursor += 1

        if not paused and cursor < len(steps):
            for x, y in steps[cursor]:
                grid.carve(x, y)
            cursor += 1

        screen.fill((0, 0, 0))
        tiles.draw_grid(screen, grid)
        if 0 < cursor < len(steps):
            for x, y in steps[cursor - 1]:
                screen.blit(tiles.floor(True), ((x - 1) * args.tile, (y - 1) * args.tile))
        pygame.display.set_caption(
            f"dungeonmaze viewer | seed {seed}  step {cursor}/{len(steps)}{'  [PAUSED]' if paused else ''}"
        )
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
