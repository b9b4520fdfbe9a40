"""Runway Core - Monthly cash flow projection from recurring cash events."""

__version__ = "0.1.0"

from .models import CashEvent, EventType, Frequency, FrequencyKind, MonthlyProjection
from .projector import CashFlowProjector, monthly_net_amount, project

__all__ = [
    "CashEvent",
    "EventType",
    "Frequency",
    "FrequencyKind",
    "MonthlyProjection",
    "CashFlowProjector",
    "monthly_net_amount",
    "project",
]
