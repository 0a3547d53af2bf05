from __future__ import annotations

import secrets
import time
from typing import Optional, Protocol

from loguru import logger

MASK64 = (1 << 64) - 1
# floor(2**64 / golden ratio)
GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class RandomSource(Protocol):
    def next_u64(self) -> int: ...


def _splitmix64(state: int) -> tuple[int, int]:
    state = (state + GOLDEN_GAMMA) & MASK64
    z = state
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return state, z ^ (z >> 31)


# ملخص: مولّد xorshift128+ بحالة محلية، يُبذر مرة واحدة لكل تشغيل.
class Xorshift128Plus:
    """64-bit xorshift128+ generator.

    The two state words are expanded from the seed with splitmix64 so that
    small seeds (0, 1, 42...) still start from well-mixed state.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed & MASK64
        sm, s0 = _splitmix64(self.seed)
        _, s1 = _splitmix64(sm)
        if s0 == 0 and s1 == 0:
            s1 = GOLDEN_GAMMA
        self._s0 = s0
        self._s1 = s1

    def next_u64(self) -> int:
        x = self._s0
        y = self._s1
        self._s0 = y
        x ^= (x << 23) & MASK64
        self._s1 = x ^ y ^ (x >> 17) ^ (y >> 26)
        return (self._s1 + y) & MASK64


def entropy_seed() -> int:
    try:
        return secrets.randbits(64)
    except (NotImplementedError, OSError) as e:
        seed = (time.time_ns() ^ id(object())) & MASK64
        logger.warning("OS entropy unavailable ({}), seeding from clock", e)
        return seed


def get_random_source(seed: Optional[int] = None) -> Xorshift128Plus:
    if seed is None:
        seed = entropy_seed()
        logger.debug("seeded from entropy")
    else:
        logger.debug("seeded with {}", seed)
    return Xorshift128Plus(seed)
