"""Data models for runway-core.

This package provides the cash event line items a projection is built from
(events.py) and the per-month projection rows (projection.py).
"""

from runway_core.models.events import (
    MONTHLY_DIVISORS,
    MONTHLY_MULTIPLIERS,
    CashEvent,
    EventType,
    Frequency,
    FrequencyKind,
)
from runway_core.models.projection import MonthlyProjection

__all__ = [
    # Enumerations
    "FrequencyKind",
    "EventType",
    # Normalization constants
    "MONTHLY_MULTIPLIERS",
    "MONTHLY_DIVISORS",
    # Line items
    "Frequency",
    "CashEvent",
    # Results
    "MonthlyProjection",
]
