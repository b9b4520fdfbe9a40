"""Tests for the monthly projection."""

from datetime import date
from decimal import Decimal

import pytest

from runway_core import CashEvent, CashFlowProjector, MonthlyProjection, monthly_net_amount, project
from runway_core.exceptions import CalendarError


def event(name: str, usd: str, frequency: str, type_: str, is_taxable: bool = False) -> CashEvent:
    return CashEvent(
        name=name, usd=usd, frequency=frequency, type_=type_, is_taxable=is_taxable
    )


@pytest.fixture
def salary_and_rent() -> list[CashEvent]:
    """Income 1000 and a 200 bill, both monthly and untaxed."""
    return [
        event("Salary", "1000", "monthly", "income"),
        event("Rent", "200", "monthly", "bill"),
    ]


class TestMonthlyNetAmount:
    """Test suite for monthly_net_amount."""

    def test_sums_contributions(self, salary_and_rent):
        assert monthly_net_amount(salary_and_rent, date(2025, 1, 1), Decimal("0.169")) == Decimal("800")

    def test_no_events_is_zero(self):
        assert monthly_net_amount([], date(2025, 1, 1), Decimal("0.169")) == Decimal("0")

    def test_one_time_only_in_its_month(self, salary_and_rent):
        events = salary_and_rent + [event("Laptop", "1500", "once(2025-02-03)", "other")]
        rate = Decimal("0")

        assert monthly_net_amount(events, date(2025, 1, 1), rate) == Decimal("800")
        assert monthly_net_amount(events, date(2025, 2, 1), rate) == Decimal("-700")
        assert monthly_net_amount(events, date(2025, 3, 1), rate) == Decimal("800")

    def test_mixed_frequencies(self):
        events = [
            event("Pay", "2000", "biweekly", "income", is_taxable=True),
            event("Groceries", "100", "weekly", "bill"),
            event("Coffee", "5", "daily", "other"),
            event("Insurance", "600", "quarterly", "bill"),
            event("Domain", "24", "yearly", "sub"),
        ]

        # 2000 * 0.75 * 2.25 - 450 - 150 - 200 - 2
        expected = Decimal("3375") - Decimal("802")
        assert monthly_net_amount(events, date(2025, 1, 1), Decimal("0.25")) == expected


class TestProject:
    """Test suite for project."""

    def test_cumulative_totals(self, salary_and_rent):
        months = [date(2025, 1, 1), date(2025, 2, 1), date(2025, 3, 1)]

        rows = project(salary_and_rent, months, Decimal("0.169"))

        assert [r.net_amount for r in rows] == [Decimal("800")] * 3
        assert [r.cumulative_total for r in rows] == [
            Decimal("800"),
            Decimal("1600"),
            Decimal("2400"),
        ]
        assert all(isinstance(r, MonthlyProjection) for r in rows)

    def test_no_months(self, salary_and_rent):
        assert project(salary_and_rent, [], Decimal("0.169")) == []

    def test_labels(self, salary_and_rent):
        rows = project(salary_and_rent, [date(2025, 9, 1)], Decimal("0"))

        assert rows[0].label == "2025-09"

    def test_running_total_goes_negative(self):
        events = [event("Rent", "1000", "monthly", "bill")]

        rows = project(events, [date(2025, 1, 1), date(2025, 2, 1)], Decimal("0"))

        assert rows[-1].cumulative_total == Decimal("-2000")


class TestCashFlowProjector:
    """Test suite for CashFlowProjector."""

    def test_two_month_horizon(self, salary_and_rent):
        projector = CashFlowProjector(salary_and_rent, Decimal("0.169"))

        rows = projector.run(date(2025, 1, 15), 2)

        assert [r.month for r in rows] == [date(2025, 1, 1), date(2025, 2, 1), date(2025, 3, 1)]
        assert rows[0].net_amount == Decimal("800")
        assert rows[1].net_amount == Decimal("800")
        assert rows[1].cumulative_total == Decimal("1600")

    def test_zero_month_horizon_is_current_month(self, salary_and_rent):
        rows = CashFlowProjector(salary_and_rent, Decimal("0")).run(date(2025, 5, 31), 0)

        assert [r.month for r in rows] == [date(2025, 5, 1)]

    def test_default_horizon_length(self, salary_and_rent):
        rows = CashFlowProjector(salary_and_rent, Decimal("0")).run(date(2025, 1, 1), 12)

        assert len(rows) == 13
        assert rows[-1].cumulative_total == Decimal("10400")

    def test_invalid_end_date_raises(self, salary_and_rent):
        projector = CashFlowProjector(salary_and_rent, Decimal("0"))

        with pytest.raises(CalendarError):
            projector.run(date(2025, 1, 31), 1)

    def test_accepts_tax_rate_as_string(self):
        projector = CashFlowProjector([event("Pay", "100", "monthly", "income", True)], "0.5")

        assert projector.run(date(2025, 1, 1), 0)[0].net_amount == Decimal("50")
