from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlanRead(BaseModel):
    """An insurance plan as returned by the API (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    provider: str
    base_price: int
    medical_coverage: int
    trip_cancellation: str
    baggage_protection: int
    emergency_evacuation: int | None
    adventure_activities: bool
    rental_car_coverage: int | None
    rating: str | None
    reviews: int | None
    country: str
    created_at: datetime | None
