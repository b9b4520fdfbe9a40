"""Plain-text rendering of projections and loaded events."""

from decimal import Decimal
from typing import Iterable

from .models import CashEvent, MonthlyProjection

AMOUNT_WIDTH = 10


def format_amount(amount: Decimal) -> str:
    """Two decimals, right-aligned in a fixed-width column."""
    return f"{amount:{AMOUNT_WIDTH}.2f}"


def format_projection_line(row: MonthlyProjection) -> str:
    """Render one month as ``YYYY-MM:\\t<net>\\t==>\\t<cumulative>``."""
    return (
        f"{row.label}:\t{format_amount(row.net_amount)}"
        f"\t==>\t{format_amount(row.cumulative_total)}"
    )


def render_projection(rows: Iterable[MonthlyProjection]) -> list[str]:
    return [format_projection_line(row) for row in rows]


def render_events(events: Iterable[CashEvent]) -> list[str]:
    """One line per event, used by verbose mode."""
    return [str(event) for event in events]
