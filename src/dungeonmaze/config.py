from dataclasses import dataclass
from typing import Optional

DEFAULT_WIDTH = 79
DEFAULT_HEIGHT = 21
DEFAULT_ROOM_FILL_RATE = 20   # percent of the stage area given to rooms
FRAME_DELAY = 0.02            # seconds between animated frames
MIN_DIMENSION = 3


def round_up_to_even(n: int) -> int:
    return n if n % 2 == 0 else n + 1


def odd_dimension(n: int) -> int:
    # Step-2 carving needs odd sides so the even lattice sits inside the rim.
    return round_up_to_even(n) - 1


@dataclass(frozen=True)
class StageConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    room_fill_rate: int = DEFAULT_ROOM_FILL_RATE
    seed: Optional[int] = None
    animate: bool = False
    frame_delay: float = FRAME_DELAY

    def __post_init__(self) -> None:
        width = odd_dimension(int(self.width))
        height = odd_dimension(int(self.height))
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise ValueError(
                f"stage must be at least {MIN_DIMENSION}x{MIN_DIMENSION} after odd adjustment, "
                f"got {width}x{height}"
            )
        if not (0 <= self.room_fill_rate <= 100):
            raise ValueError("room_fill_rate must be 0..100")
        if self.frame_delay < 0:
            raise ValueError("frame_delay cannot be negative")
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)


# Defaults used by the command line (can be swapped by callers)
DEFAULT_CONFIG = StageConfig()
