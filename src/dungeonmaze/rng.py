import time
from dataclasses import dataclass
from typing import List, Optional

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def clamp_seed(seed: int) -> int:
    """Fold any integer into the valid Park–Miller state range 1..M-1."""
    s = seed % M
    return s if s != 0 else 1


@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator, passed explicitly to every
    stage that draws random numbers (no module-level random state).
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(clamp_seed(seed))

    @classmethod
    def from_time(cls) -> "PMRandom":
        return cls.from_seed(time.time_ns())

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def intn(self, n: int) -> int:
        """Uniform-ish integer in 0..n-1."""
        if n <= 0:
            raise ValueError("intn bound must be positive")
        return self.next32() % n

    def permutation(self, start: int, end: int) -> List[int]:
        """Fisher–Yates shuffle of start..end-1."""
        out = list(range(start, end))
        for i in range(len(out)):
            j = self.intn(i + 1)
            out[i], out[j] = out[j], out[i]
        return out


def make_rng(seed: Optional[int]) -> PMRandom:
    return PMRandom.from_time() if seed is None else PMRandom.from_seed(seed)
