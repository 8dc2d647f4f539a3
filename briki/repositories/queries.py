"""Statement catalogue for plans and interactions.

Every read the repositories perform is built here so the SQL surface of the
service lives in one place. Builders only construct statements; execution,
logging and row mapping belong to the repositories.
"""

from __future__ import annotations

from sqlalchemy import Select, false, func, or_, select

from briki.core.constants import ALL_COUNTRIES
from briki.models.insurance_plan import InsurancePlan
from briki.models.plan_interaction import PlanInteraction


def all_plans() -> Select:
    return select(InsurancePlan).order_by(InsurancePlan.name.asc(), InsurancePlan.id.asc())


def plan_by_id(plan_id: int) -> Select:
    return select(InsurancePlan).where(InsurancePlan.id == plan_id)


def plan_count() -> Select:
    return select(func.count()).select_from(InsurancePlan)


def filter_plans(
    *,
    destination: str | None,
    include_adventure_activities: bool | None,
    min_medical_coverage: int | None,
) -> Select:
    stmt = select(InsurancePlan)
    if destination is not None:
        stmt = stmt.where(or_(InsurancePlan.country == destination, InsurancePlan.country == ALL_COUNTRIES))
    if include_adventure_activities is not None:
        stmt = stmt.where(InsurancePlan.adventure_activities.is_(include_adventure_activities))
    if min_medical_coverage is not None:
        stmt = stmt.where(InsurancePlan.medical_coverage >= min_medical_coverage)
    return stmt.order_by(InsurancePlan.base_price.asc(), InsurancePlan.id.asc())


def popular_plans(limit: int) -> Select:
    # Inner join: plans without any interaction never rank.
    interaction_count = func.count(PlanInteraction.id).label("interaction_count")
    return (
        select(InsurancePlan, interaction_count)
        .join(PlanInteraction, PlanInteraction.plan_id == InsurancePlan.id)
        .group_by(InsurancePlan.id)
        .order_by(interaction_count.desc(), InsurancePlan.id.asc())
        .limit(limit)
    )


def interactions_by_plan(plan_id: int) -> Select:
    return (
        select(PlanInteraction)
        .where(PlanInteraction.plan_id == plan_id)
        .order_by(PlanInteraction.timestamp.desc(), PlanInteraction.id.desc())
    )


def interactions_by_user(user_id: str | None, device_id: str | None) -> Select:
    conditions = []
    if user_id is not None:
        conditions.append(PlanInteraction.user_id == user_id)
    if device_id is not None:
        conditions.append(PlanInteraction.device_id == device_id)

    return (
        select(PlanInteraction)
        .where(or_(*conditions) if conditions else false())
        .order_by(PlanInteraction.timestamp.desc(), PlanInteraction.id.desc())
    )


def interaction_count() -> Select:
    return select(func.count()).select_from(PlanInteraction)
