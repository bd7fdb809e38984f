# src/dungeonmaze/render/image.py
# Render a stage grid to a PNG using Pillow. Wall tiles are drawn as line
# arms toward their solid neighbors, matching the unicode glyphs.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..grid import Grid
from .glyphs import arms_for_mask

FLOOR_COLOR = (24, 24, 24, 255)
WALL_COLOR = (200, 200, 200, 255)


def wall_tile_image(mask: int, tile_size: int) -> Image.Image:
    img = Image.new("RGBA", (tile_size, tile_size), FLOOR_COLOR)
    draw = ImageDraw.Draw(img)
    c = tile_size // 2
    line_w = max(1, tile_size // 4)
    for dx, dy in arms_for_mask(mask):
        draw.line([(c, c), (c + dx * tile_size, c + dy * tile_size)], fill=WALL_COLOR, width=line_w)
    return img


def render_image(grid: Grid, tile_size: int = 16, margin: int = 0) -> Image.Image:
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    w = grid.width * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), FLOOR_COLOR)
    cache = {}
    for tile in grid.tiles():
        if tile.empty:
            continue
        mask = grid.neighbor_mask(tile.x, tile.y)
        if mask not in cache:
            cache[mask] = wall_tile_image(mask, tile_size)
        x0 = margin + (tile.x - 1) * tile_size
        y0 = margin + (tile.y - 1) * tile_size
        canvas.paste(cache[mask], (x0, y0, x0 + tile_size, y0 + tile_size))
    return canvas


def save_png(grid: Grid, out_png: str, tile_size: int = 16) -> Tuple[int, int]:
    img = render_image(grid, tile_size=tile_size)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
    return img.size
