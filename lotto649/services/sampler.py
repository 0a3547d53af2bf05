from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_TICKET
from .rng import MASK64, RandomSource

_HASH_SEED = 0x517CC1B727220A95
_HASH_MUL = 0x9E3779B97F4A7C15


@dataclass(frozen=True)
class Ticket:
    numbers: tuple[int, ...]
    bonus: Optional[int] = None

    @property
    def fingerprint(self) -> tuple[Optional[int], ...]:
        return (*self.numbers, self.bonus)


def fingerprint64(ticket: Ticket) -> int:
    """Multiplicative 64-bit hash of the drawn values, for log lines."""
    h = _HASH_SEED
    for value in ticket.fingerprint:
        h = ((h ^ (value or 0)) * _HASH_MUL) & MASK64
    return h


# ملخص: خلط فيشر-ييتس كامل للمجموعة 1..49 باستهلاك 48 قيمة عشوائية.
def shuffle_pool(source: RandomSource) -> list[int]:
    pool = list(range(MIN_NUMBER, MAX_NUMBER + 1))
    for i in range(len(pool) - 1, 0, -1):
        j = source.next_u64() % (i + 1)
        pool[i], pool[j] = pool[j], pool[i]
    return pool


def draw_ticket(source: RandomSource, *, with_bonus: bool = False) -> Ticket:
    """Draw one ticket.

    The first ``NUMBERS_PER_TICKET`` shuffled values are the main numbers,
    sorted ascending. With ``with_bonus`` the next value becomes the bonus;
    it is left out of the sort.
    """
    pool = shuffle_pool(source)
    numbers = tuple(sorted(pool[:NUMBERS_PER_TICKET]))
    bonus = pool[NUMBERS_PER_TICKET] if with_bonus else None
    return Ticket(numbers=numbers, bonus=bonus)
