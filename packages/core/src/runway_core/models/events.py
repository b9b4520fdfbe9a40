"""Cash event data models.

This module provides the line items a projection is built from:
- Frequency and FrequencyKind: how often an event recurs
- EventType: whether an event adds to or subtracts from cash flow
- CashEvent: one row of input combining amount, frequency, type and taxability

Every frequency is normalized to a monthly-equivalent amount with fixed
multipliers (a month is 30 days, 4.5 weeks or 2.25 fortnights). One-time
events only count in the month of their date.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from runway_core.exceptions import InvalidEventTypeError, InvalidFrequencyError


class FrequencyKind(str, Enum):
    """How often a cash event recurs."""

    ONE_TIME = "one_time"
    DAILY = "daily"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi_weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


_FREQUENCY_TOKENS: dict[str, FrequencyKind] = {
    "1": FrequencyKind.ONE_TIME,
    "once": FrequencyKind.ONE_TIME,
    "onetime": FrequencyKind.ONE_TIME,
    "d": FrequencyKind.DAILY,
    "day": FrequencyKind.DAILY,
    "daily": FrequencyKind.DAILY,
    "w": FrequencyKind.WEEKLY,
    "week": FrequencyKind.WEEKLY,
    "weekly": FrequencyKind.WEEKLY,
    "biweekly": FrequencyKind.BI_WEEKLY,
    "m": FrequencyKind.MONTHLY,
    "month": FrequencyKind.MONTHLY,
    "monthly": FrequencyKind.MONTHLY,
    "quarter": FrequencyKind.QUARTERLY,
    "quarterly": FrequencyKind.QUARTERLY,
    "y": FrequencyKind.YEARLY,
    "year": FrequencyKind.YEARLY,
    "yearly": FrequencyKind.YEARLY,
}

# One-time events are handled separately and never scaled.
MONTHLY_MULTIPLIERS: dict[FrequencyKind, Decimal] = {
    FrequencyKind.DAILY: Decimal("30"),
    FrequencyKind.WEEKLY: Decimal("4.5"),
    FrequencyKind.BI_WEEKLY: Decimal("2.25"),
    FrequencyKind.MONTHLY: Decimal("1"),
}

MONTHLY_DIVISORS: dict[FrequencyKind, Decimal] = {
    FrequencyKind.QUARTERLY: Decimal("3"),
    FrequencyKind.YEARLY: Decimal("12"),
}

_BOOLEAN_TOKENS: dict[str, bool] = {"true": True, "false": False}

_DISPLAY_NAMES: dict[FrequencyKind, str] = {
    FrequencyKind.ONE_TIME: "OneTime",
    FrequencyKind.DAILY: "Daily",
    FrequencyKind.WEEKLY: "Weekly",
    FrequencyKind.BI_WEEKLY: "BiWeekly",
    FrequencyKind.MONTHLY: "Monthly",
    FrequencyKind.QUARTERLY: "Quarterly",
    FrequencyKind.YEARLY: "Yearly",
}


class Frequency(BaseModel):
    """A parsed recurrence.

    ``on_date`` is only meaningful for one-time events. A one-time event
    without a date is kept but never matches a projected month.
    """

    model_config = ConfigDict(frozen=True)

    kind: FrequencyKind
    on_date: Optional[date] = Field(
        default=None,
        description="Date of a one-time event; None for recurring or undated events",
    )

    @classmethod
    def parse(cls, text: str) -> "Frequency":
        """Parse a frequency token such as ``monthly`` or ``once(2024-03-15)``.

        Tokens are case-insensitive. A one-time token may carry a
        ``YYYY-MM-DD`` date in parentheses; a missing or unparseable date
        yields an undated one-time frequency rather than an error.

        Raises:
            InvalidFrequencyError: If the token is not recognized.
        """
        lowered = text.strip().lower()
        token, _, argument = lowered.partition("(")
        kind = _FREQUENCY_TOKENS.get(token)
        if kind is None:
            raise InvalidFrequencyError(text)

        if kind is not FrequencyKind.ONE_TIME:
            return cls(kind=kind)

        on_date = None
        if argument.endswith(")"):
            try:
                on_date = datetime.strptime(argument[:-1], "%Y-%m-%d").date()
            except ValueError:
                on_date = None
        return cls(kind=kind, on_date=on_date)

    @property
    def is_one_time(self) -> bool:
        return self.kind is FrequencyKind.ONE_TIME

    def matches_month(self, month: date) -> bool:
        """True if a dated one-time event falls in the month of ``month``."""
        if not self.is_one_time or self.on_date is None:
            return False
        return (self.on_date.year, self.on_date.month) == (month.year, month.month)

    def to_monthly(self, amount: Decimal, month: date) -> Decimal:
        """Normalize a per-occurrence amount to its contribution in ``month``."""
        if self.is_one_time:
            return amount if self.matches_month(month) else Decimal("0")
        if self.kind in MONTHLY_DIVISORS:
            return amount / MONTHLY_DIVISORS[self.kind]
        return amount * MONTHLY_MULTIPLIERS[self.kind]

    def __str__(self) -> str:
        name = _DISPLAY_NAMES[self.kind]
        if self.is_one_time and self.on_date is not None:
            return f"{name}({self.on_date.isoformat()})"
        return name


class EventType(str, Enum):
    """Cash event classification. Only income adds to cash flow."""

    INCOME = "income"
    BILL = "bill"
    INVESTMENT = "investment"
    SUBSCRIPTION = "subscription"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> "EventType":
        """Parse a case-insensitive type token (``sub`` is short for subscription).

        Raises:
            InvalidEventTypeError: If the token is not recognized.
        """
        token = text.strip().lower()
        if token == "sub":
            return cls.SUBSCRIPTION
        try:
            return cls(token)
        except ValueError:
            raise InvalidEventTypeError(text) from None

    def __str__(self) -> str:
        return self.name.capitalize()


class CashEvent(BaseModel):
    """One recurring or one-time inflow or outflow.

    Amounts are stored as positive magnitudes; the sign of the monthly
    contribution comes from ``type_``. Events are immutable once loaded.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Salary",
                    "usd": "5000.00",
                    "frequency": "monthly",
                    "type_": "income",
                    "is_taxable": True,
                },
                {
                    "name": "Car insurance",
                    "usd": "900.00",
                    "frequency": "once(2025-03-01)",
                    "type_": "bill",
                },
            ]
        },
    )

    name: str = Field(description="Free-text label, not used in computation")
    usd: Decimal = Field(description="Per-occurrence amount in currency units")
    frequency: Frequency = Field(description="How often the event recurs")
    type_: EventType = Field(description="Income or cost category")
    is_taxable: bool = Field(
        default=False,
        description="Whether the flat tax rate is deducted before normalization",
    )

    @field_validator("usd", mode="before")
    @classmethod
    def coerce_usd_to_decimal(cls, v):
        """Coerce string amounts to Decimal."""
        if isinstance(v, str):
            try:
                return Decimal(v.strip())
            except InvalidOperation:
                raise ValueError(f"Invalid amount: {v!r}") from None
        return v

    @field_validator("frequency", mode="before")
    @classmethod
    def parse_frequency(cls, v):
        if isinstance(v, str):
            return Frequency.parse(v)
        return v

    @field_validator("type_", mode="before")
    @classmethod
    def parse_type(cls, v):
        if isinstance(v, str):
            return EventType.parse(v)
        return v

    @field_validator("is_taxable", mode="before")
    @classmethod
    def empty_is_not_taxable(cls, v):
        """Accept only ``true``/``false`` text; an empty cell is an absent flag."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        if isinstance(v, str):
            token = v.strip().lower()
            if token not in _BOOLEAN_TOKENS:
                raise ValueError(f"Invalid boolean: {v!r} (expected true or false)")
            return _BOOLEAN_TOKENS[token]
        return v

    @property
    def is_income(self) -> bool:
        return self.type_ is EventType.INCOME

    def taxed_amount(self, tax_rate: Decimal) -> Decimal:
        """Per-occurrence amount after the flat tax, if the event is taxable."""
        if self.is_taxable:
            return self.usd * (Decimal("1") - tax_rate)
        return self.usd

    def monthly_amount(self, month: date, tax_rate: Decimal) -> Decimal:
        """
        Signed contribution of this event to ``month``.

        The taxed per-occurrence amount is normalized by frequency, then
        negated for every type except income.

        Args:
            month: Any date in the target month (normally its first day).
            tax_rate: Flat rate applied to taxable events, 0.0-1.0.

        Returns:
            Positive Decimal for income, negative for costs, zero for
            one-time events outside ``month``.
        """
        amount = self.frequency.to_monthly(self.taxed_amount(tax_rate), month)
        return amount if self.is_income else -amount

    def __str__(self) -> str:
        return (
            f"CashEvent(name={self.name!r}, usd={self.usd}, "
            f"frequency={str(self.frequency)}, type_={str(self.type_)}, "
            f"is_taxable={self.is_taxable})"
        )
