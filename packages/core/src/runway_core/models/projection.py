"""Projection result rows."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MonthlyProjection(BaseModel):
    """Net cash flow for one projected month plus the running total."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "month": "2025-01-01",
                    "net_amount": "800.00",
                    "cumulative_total": "1600.00",
                }
            ]
        },
    )

    month: date = Field(description="First day of the projected month")
    net_amount: Decimal = Field(description="Sum of every event's contribution to the month")
    cumulative_total: Decimal = Field(
        description="Running sum of net amounts from the first projected month through this one"
    )

    @computed_field
    @property
    def label(self) -> str:
        """Year-month label (e.g., '2025-01')."""
        return self.month.strftime("%Y-%m")
