from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from briki.core.constants import DEFAULT_POPULAR_LIMIT
from briki.data.sample_plans import SAMPLE_PLANS
from briki.db.base import Base
from briki.models.insurance_plan import InsurancePlan
from briki.models.plan_interaction import PlanInteraction
from briki.repositories import queries
from briki.schemas.plans import PlanRead

logger = logging.getLogger(__name__)


@dataclass
class PlanFilterCriteria:
    # Only destination, include_adventure_activities and min_medical_coverage reach the query.
    origin: str | None = None
    destination: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    age: int | None = None
    travelers_count: int | None = None
    min_medical_coverage: int | None = None
    include_adventure_activities: bool | None = None


def map_plan_row(row: InsurancePlan) -> PlanRead:
    return PlanRead(
        id=row.id,
        name=row.name,
        provider=row.provider,
        base_price=row.base_price,
        medical_coverage=row.medical_coverage,
        trip_cancellation=row.trip_cancellation,
        baggage_protection=row.baggage_protection,
        emergency_evacuation=row.emergency_evacuation,
        adventure_activities=row.adventure_activities,
        rental_car_coverage=row.rental_car_coverage,
        rating=row.rating,
        reviews=row.reviews,
        country=row.country,
        created_at=row.created_at,
    )


class PlanRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def initialize_db(self) -> int:
        """Create the plan tables if missing, then seed. Returns the number of seeded plans."""
        try:
            Base.metadata.create_all(
                self.db.connection(),
                tables=[InsurancePlan.__table__, PlanInteraction.__table__],
                checkfirst=True,
            )
            self.db.commit()
            logger.info("Database tables initialized successfully")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error initializing database tables")
            raise

        return self.seed_initial_data()

    def seed_initial_data(self, plans: Sequence[dict[str, Any]] | None = None) -> int:
        """Insert the sample plans when the table is empty, all in one transaction."""
        plans = SAMPLE_PLANS if plans is None else plans
        try:
            existing = self.db.execute(queries.plan_count()).scalar_one()
            if existing:
                logger.info("insurance_plans already seeded rows=%s", existing)
                return 0

            self.db.add_all([InsurancePlan(**plan) for plan in plans])
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error seeding insurance_plans; batch rolled back")
            raise

        logger.info("Seeded insurance_plans rows=%s", len(plans))
        return len(plans)

    def count_plans(self) -> int:
        try:
            return int(self.db.execute(queries.plan_count()).scalar_one())
        except SQLAlchemyError:
            logger.exception("Error counting insurance plans")
            raise

    def get_all_plans(self) -> list[PlanRead]:
        try:
            rows = self.db.execute(queries.all_plans()).scalars().all()
        except SQLAlchemyError:
            logger.exception("Error fetching all plans")
            raise
        return [map_plan_row(r) for r in rows]

    def get_plan_by_id(self, plan_id: int) -> PlanRead | None:
        try:
            row = self.db.execute(queries.plan_by_id(plan_id)).scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Error fetching plan with id=%s", plan_id)
            raise
        return map_plan_row(row) if row is not None else None

    def filter_plans(self, criteria: PlanFilterCriteria) -> list[PlanRead]:
        stmt = queries.filter_plans(
            destination=criteria.destination,
            include_adventure_activities=criteria.include_adventure_activities,
            min_medical_coverage=criteria.min_medical_coverage,
        )
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError:
            logger.exception("Error filtering plans")
            raise
        return [map_plan_row(r) for r in rows]

    def get_popular_plans(self, limit: int = DEFAULT_POPULAR_LIMIT) -> list[PlanRead]:
        try:
            rows = self.db.execute(queries.popular_plans(limit)).all()
        except SQLAlchemyError:
            logger.exception("Error fetching popular plans")
            raise
        return [map_plan_row(r[0]) for r in rows]
