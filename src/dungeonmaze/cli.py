#!/usr/bin/env python3
"""Command-line interface for generating and printing a dungeon stage."""

import argparse
import logging as log
import sys
import time
from typing import List, Optional, TextIO

from .config import DEFAULT_CONFIG, StageConfig
from .grid import Grid
from .mapgen.generator import generate_stage
from .mapgen.maze import MazeSeedError, Move
from .render.glyphs import render_ascii, render_unicode

# Cursor home + erase display
CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a room-and-maze dungeon and print it with box-drawing glyphs.")
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.width,
                        help="Total maze width, forced odd (default: %(default)s)")
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.height,
                        help="Total maze height, forced odd (default: %(default)s)")
    parser.add_argument("--room_fill_rate", type=int, default=DEFAULT_CONFIG.room_fill_rate,
                        help="Percent of the area given to rooms, 0..100 (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible output (default: time based)")
    parser.add_argument("--animate", action="store_true",
                        help="Redraw the terminal after every carve step")
    parser.add_argument("--ascii", action="store_true",
                        help="Print '#' walls instead of box-drawing glyphs")
    parser.add_argument("--png", type=str, default=None,
                        help="Also write the stage to this PNG file")
    parser.add_argument("--tile", type=int, default=16,
                        help="Tile size in pixels for --png (default: %(default)s)")
    parser.add_argument('-log', '--loglevel', default='warning', type=str.lower,
                        choices=['debug', 'info', 'warning', 'error', 'critical'],
                        help='Provide logging level. Example --loglevel debug, default=warning')
    return parser


def make_animator(config: StageConfig, stream: TextIO):
    def on_carve(grid: Grid, move: Move) -> None:
        stream.write(CLEAR_SCREEN)
        stream.write(render_unicode(grid))
        stream.flush()
        time.sleep(config.frame_delay)

    return on_carve


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log.basicConfig(
        level=args.loglevel.upper(),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        config = StageConfig(
            width=args.width,
            height=args.height,
            room_fill_rate=args.room_fill_rate,
            seed=args.seed,
            animate=args.animate,
        )
    except ValueError as e:
        parser.error(str(e))

    on_carve = make_animator(config, sys.stdout) if config.animate else None
    try:
        stage = generate_stage(config, on_carve=on_carve)
    except MazeSeedError as e:
        log.error(f"Maze generation failed: {e}")
        return 1
    log.info(f"Generated stage with seed {stage.seed}")

    if config.animate:
        sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.write(render_ascii(stage.grid) if args.ascii else render_unicode(stage.grid))

    if args.png:
        from .render.image import save_png
        size = save_png(stage.grid, args.png, tile_size=args.tile)
        log.info(f"Wrote {args.png} ({size[0]}x{size[1]})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
