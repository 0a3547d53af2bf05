from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .rng import RandomSource


# ملخص: حالة التشغيل الواحد: مصدر العشوائية ومجموعة البصمات المسحوبة والعدادات.
@dataclass
class RunContext:
    source: RandomSource
    seen: set[tuple[Optional[int], ...]] = field(default_factory=set)
    emitted: int = 0
    redraws: int = 0
