# Tile value type and the glyphs used to draw it.

from dataclasses import dataclass

OPEN = " "
UNKNOWN = "?"
WALL_ASCII = "#"

# Neighbor mask bits, ordered top, right, bottom, left (most significant first)
TOP, RIGHT, BOTTOM, LEFT = 0b1000, 0b0100, 0b0010, 0b0001

GLYPHS = {
    "1111": "╋",
    "0111": "┳",
    "1011": "┫",
    "1101": "┻",
    "1110": "┣",
    "0011": "┓",
    "0110": "┏",
    "0101": "━",
    "1010": "┃",
    "1001": "┛",
    "1100": "┗",
    "0010": "╻",
    "0100": "╺",
    "0001": "╸",
    "1000": "╹",
    "0000": "╋",  # isolated pillar
}


def mask_to_string(mask: int) -> str:
    return format(mask, "04b")


@dataclass
class Tile:
    x: int
    y: int
    empty: bool = False  # solid wall until carved
