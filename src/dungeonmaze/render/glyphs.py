# src/dungeonmaze/render/glyphs.py
"""
Text renderers. Each solid tile looks at its four neighbors and picks the
box-drawing piece that joins it to the solid ones; open tiles are blank.
"""

from typing import List, Tuple

from ..grid import Grid
from ..tiles import BOTTOM, GLYPHS, LEFT, OPEN, RIGHT, TOP, UNKNOWN, WALL_ASCII, mask_to_string

# Unit vectors for each mask bit, used by the image renderers.
ARMS = (
    (TOP, (0, -1)),
    (RIGHT, (1, 0)),
    (BOTTOM, (0, 1)),
    (LEFT, (-1, 0)),
)


def glyph_for_mask(mask: int) -> str:
    return GLYPHS.get(mask_to_string(mask), UNKNOWN)


def glyph_at(grid: Grid, x: int, y: int) -> str:
    if grid.is_empty(x, y):
        return OPEN
    return glyph_for_mask(grid.neighbor_mask(x, y))


def arms_for_mask(mask: int) -> List[Tuple[int, int]]:
    """Directions a wall piece reaches toward; an isolated pillar reaches all four."""
    if mask == 0:
        mask = TOP | RIGHT | BOTTOM | LEFT
    return [vec for bit, vec in ARMS if mask & bit]


def render_unicode(grid: Grid) -> str:
    lines = []
    for y in range(1, grid.height + 1):
        lines.append("".join(glyph_at(grid, x, y) for x in range(1, grid.width + 1)))
    return "".join(line + "\n" for line in lines)


def render_ascii(grid: Grid) -> str:
    lines = []
    for row in grid.rows():
        lines.append("".join(OPEN if t.empty else WALL_ASCII for t in row))
    return "".join(line + "\n" for line in lines)
