from __future__ import annotations

from .controller import RunController
from .rng import Xorshift128Plus, get_random_source
from .sampler import Ticket, draw_ticket

__all__ = ["RunController", "Ticket", "Xorshift128Plus", "draw_ticket", "get_random_source"]
