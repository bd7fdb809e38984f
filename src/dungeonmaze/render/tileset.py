# src/dungeonmaze/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..grid import Grid
from .glyphs import arms_for_mask

FLOOR_COLOR: Tuple[int, int, int] = (24, 24, 24)
WALL_COLOR: Tuple[int, int, int] = (200, 200, 200)
CARVE_COLOR: Tuple[int, int, int] = (120, 40, 40)


class Tileset:
    """
    Tiny cached painter:
      - One Surface per neighbor mask (0..15), plus the open floor tile
      - Wall pieces are line arms toward solid neighbors, a cross when isolated
      - Surfaces are exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int):
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        self.tile_size = tile_size

    @lru_cache(maxsize=32)
    def wall(self, mask: int) -> pygame.Surface:
        t = self.tile_size
        img = pygame.Surface((t, t))
        img.fill(FLOOR_COLOR)
        c = t // 2
        line_w = max(1, t // 4)
        for dx, dy in arms_for_mask(mask):
            pygame.draw.line(img, WALL_COLOR, (c, c), (c + dx * t, c + dy * t), line_w)
        return img

    @lru_cache(maxsize=2)
    def floor(self, highlight: bool = False) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size))
        img.fill(CARVE_COLOR if highlight else FLOOR_COLOR)
        return img

    def draw_grid(self, screen: pygame.Surface, grid: Grid, origin_xy: tuple[int, int] = (0, 0)) -> None:
        ox, oy = origin_xy
        t = self.tile_size
        for tile in grid.tiles():
            if tile.empty:
                img = self.floor()
            else:
                img = self.wall(grid.neighbor_mask(tile.x, tile.y))
            screen.blit(img, (ox + (tile.x - 1) * t, oy + (tile.y - 1) * t))
