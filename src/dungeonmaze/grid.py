from copy import deepcopy
from dataclasses import dataclass
from typing import Iterator, List

from .tiles import BOTTOM, LEFT, RIGHT, TOP, Tile, mask_to_string


@dataclass
class Grid:
    """
    Flat row-major tile buffer with 1-based coordinates:
    x in 1..width, y in 1..height. Coordinate 0 and anything past the
    far edge never exists.
    """
    width: int
    height: int
    buf: List[Tile]

    @classmethod
    def solid(cls, width: int, height: int) -> "Grid":
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be positive")
        buf = [Tile(x, y) for y in range(1, height + 1) for x in range(1, width + 1)]
        return cls(width=width, height=height, buf=buf)

    def idx(self, x: int, y: int) -> int:
        return (y - 1) * self.width + (x - 1)

    def exists(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def is_edge(self, x: int, y: int) -> bool:
        return x == 1 or x == self.width or y == 1 or y == self.height

    def get(self, x: int, y: int) -> Tile:
        if not self.exists(x, y):
            raise IndexError(f"no tile at ({x}, {y}) on a {self.width}x{self.height} grid")
        return self.buf[self.idx(x, y)]

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y).empty

    def is_solid_at(self, x: int, y: int) -> bool:
        return self.exists(x, y) and not self.buf[self.idx(x, y)].empty

    def carve(self, x: int, y: int) -> Tile:
        tile = self.get(x, y)
        tile.empty = True
        return tile

    def neighbor_mask(self, x: int, y: int) -> int:
        mask = 0
        if self.is_solid_at(x, y - 1):
            mask |= TOP
        if self.is_solid_at(x + 1, y):
            mask |= RIGHT
        if self.is_solid_at(x, y + 1):
            mask |= BOTTOM
        if self.is_solid_at(x - 1, y):
            mask |= LEFT
        return mask

    def mask_string(self, x: int, y: int) -> str:
        return mask_to_string(self.neighbor_mask(x, y))

    def tiles(self) -> Iterator[Tile]:
        return iter(self.buf)

    def rows(self) -> Iterator[List[Tile]]:
        for y in range(self.height):
            yield self.buf[y * self.width:(y + 1) * self.width]

    def empty_count(self) -> int:
        return sum(1 for t in self.buf if t.empty)

    def copy(self) -> "Grid":
        return deepcopy(self)
