from __future__ import annotations

from .sampler import Ticket


def render_numbers(numbers: tuple[int, ...]) -> str:
    return " ".join(f"{n:02d}" for n in numbers)


# ملخص: يبني سطر التذكرة حسب النمط: أرقام فقط، أو رقم التذكرة مع رقم المكافأة.
def render_ticket(ticket: Ticket, index: int | None = None) -> str:
    """Render one ticket line.

    Basic tickets render as ``06 09 14 25 32 45``. Tickets carrying a bonus
    render as ``Ticket  1: 06 09 14 25 32 45  Bonus 07`` and need ``index``.
    """
    body = render_numbers(ticket.numbers)
    if ticket.bonus is None:
        return body
    if index is None:
        raise ValueError("index is required for tickets with a bonus number")
    return f"Ticket {index:2d}: {body}  Bonus {ticket.bonus:02d}"
