"""SQLAlchemy model for insurance_plans.

A plan is a purchasable insurance product. Rows are seeded once at startup and
are read-only to the API afterwards.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, Text, false, func, text
from sqlalchemy.orm import Mapped, mapped_column

from briki.core.constants import ALL_COUNTRIES
from briki.db.base import Base


class InsurancePlan(Base):
    __tablename__ = "insurance_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    provider: Mapped[str] = mapped_column(Text, nullable=False)
    base_price: Mapped[int] = mapped_column(Integer, nullable=False)
    medical_coverage: Mapped[int] = mapped_column(Integer, nullable=False)
    trip_cancellation: Mapped[str] = mapped_column(Text, nullable=False)
    baggage_protection: Mapped[int] = mapped_column(Integer, nullable=False)
    emergency_evacuation: Mapped[int | None] = mapped_column(Integer, nullable=True)
    adventure_activities: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    rental_car_coverage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating: Mapped[str | None] = mapped_column(Text, nullable=True)
    reviews: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0, server_default=text("0"))
    country: Mapped[str] = mapped_column(Text, nullable=False, default=ALL_COUNTRIES, server_default=ALL_COUNTRIES)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("base_price >= 0", name="ck_insurance_plans_base_price_non_negative"),
        CheckConstraint("medical_coverage >= 0", name="ck_insurance_plans_medical_coverage_non_negative"),
        CheckConstraint("baggage_protection >= 0", name="ck_insurance_plans_baggage_protection_non_negative"),
        CheckConstraint(
            "emergency_evacuation IS NULL OR emergency_evacuation >= 0",
            name="ck_insurance_plans_emergency_evacuation_non_negative",
        ),
        CheckConstraint(
            "rental_car_coverage IS NULL OR rental_car_coverage >= 0",
            name="ck_insurance_plans_rental_car_coverage_non_negative",
        ),
    )

    def __repr__(self) -> str:
        return f"<InsurancePlan id={self.id} {self.name!r} provider={self.provider!r}>"
