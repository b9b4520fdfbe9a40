"""Monthly cash flow projection.

Sums every cash event's monthly-equivalent contribution for each month of
the horizon and carries a running cumulative total. All inputs, including
the current date, are passed in explicitly.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

import structlog

from .models import CashEvent, MonthlyProjection
from .periods import first_day_of_months_between, horizon

logger = structlog.get_logger()


def monthly_net_amount(
    events: Iterable[CashEvent],
    month: date,
    tax_rate: Decimal,
) -> Decimal:
    """Net contribution of all events to ``month``."""
    return sum(
        (event.monthly_amount(month, tax_rate) for event in events),
        Decimal("0"),
    )


def project(
    events: Sequence[CashEvent],
    months: Iterable[date],
    tax_rate: Decimal,
) -> list[MonthlyProjection]:
    """
    Project net cash flow for each month, in the order given.

    Args:
        events: Loaded cash events.
        months: First-of-month dates, ascending.
        tax_rate: Flat rate applied to taxable events.

    Returns:
        One MonthlyProjection per month with the cumulative total so far.
    """
    rows = []
    cumulative = Decimal("0")
    for month in months:
        net = monthly_net_amount(events, month, tax_rate)
        cumulative += net
        logger.debug(
            "month_projected",
            month=month.isoformat(),
            net_amount=str(net),
            cumulative_total=str(cumulative),
        )
        rows.append(
            MonthlyProjection(month=month, net_amount=net, cumulative_total=cumulative)
        )
    return rows


class CashFlowProjector:
    """
    Project a fixed set of cash events over a horizon starting today.

    The events and tax rate are fixed at construction; ``run`` takes the
    current date so callers control the clock.
    """

    def __init__(self, events: Sequence[CashEvent], tax_rate: Decimal):
        self.events = list(events)
        self.tax_rate = Decimal(tax_rate)

    def months_for(self, today: date, months: int) -> list[date]:
        """First-of-month dates from ``today``'s month through ``months`` months later.

        Raises:
            CalendarError: If ``today`` plus ``months`` is not a real date.
        """
        start_date, end_date = horizon(today, months)
        return first_day_of_months_between(start_date, end_date)

    def run(self, today: date, months: int) -> list[MonthlyProjection]:
        """Project from ``today`` over ``months`` calendar months."""
        dates = self.months_for(today, months)
        logger.info(
            "projection_started",
            start=today.isoformat(),
            months=months,
            periods=len(dates),
            events=len(self.events),
            tax_rate=str(self.tax_rate),
        )
        return project(self.events, dates, self.tax_rate)
