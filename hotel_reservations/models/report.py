"""Reporting value objects."""

from decimal import Decimal

from pydantic import BaseModel, Field


class ReservationReport(BaseModel):
    """Aggregate view over every reservation held by the coordinator."""

    total_reservations: int = Field(ge=0)
    pending: int = Field(ge=0)
    confirmed: int = Field(ge=0)
    cancelled: int = Field(ge=0)
    total_revenue: Decimal = Field(ge=0, description="Sum of confirmed totals")
