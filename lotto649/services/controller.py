from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from loguru import logger

from ..errors import InvalidArgument, ResourceExhaustion
from .context import RunContext
from .formatting import render_ticket
from .rng import RandomSource
from .sampler import Ticket, draw_ticket, fingerprint64


class RunController:
    """Draws ``count`` tickets and writes one line per ticket.

    In unique mode each ticket carries a bonus number and no (numbers, bonus)
    pair is emitted twice within the same run.
    """

    def __init__(
        self,
        source: RandomSource,
        *,
        unique: bool = False,
        out: Optional[TextIO] = None,
    ) -> None:
        self.unique = unique
        self.out = out
        self.ctx = RunContext(source=source)

    def _draw_unique(self) -> Ticket:
        while True:
            ticket = draw_ticket(self.ctx.source, with_bonus=True)
            if ticket.fingerprint not in self.ctx.seen:
                break
            self.ctx.redraws += 1
            logger.debug("duplicate draw {:016x}, redrawing", fingerprint64(ticket))
        try:
            self.ctx.seen.add(ticket.fingerprint)
        except MemoryError:
            raise ResourceExhaustion(
                f"out of memory tracking {len(self.ctx.seen)} drawn tickets"
            ) from None
        return ticket

    def generate(self, count: int) -> Iterator[Ticket]:
        if count <= 0:
            raise InvalidArgument(f"Invalid ticket count {count!r}. Must be a positive integer.")
        for _ in range(count):
            if self.unique:
                ticket = self._draw_unique()
            else:
                ticket = draw_ticket(self.ctx.source)
            self.ctx.emitted += 1
            yield ticket

    # ملخص: يسحب التذاكر ويطبع كل سطر ويعيد عدد الأسطر المطبوعة.
    def run(self, count: int) -> int:
        out = self.out or sys.stdout
        for index, ticket in enumerate(self.generate(count), start=1):
            print(render_ticket(ticket, index), file=out)
        logger.debug(
            "run finished: {} tickets, {} redraws", self.ctx.emitted, self.ctx.redraws
        )
        return self.ctx.emitted
