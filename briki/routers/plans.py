"""Insurance plan routes.

Read-only access to the plan catalogue: full listing, filtered search, the
most-interacted plans, and single-plan lookup.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from briki.db.session import get_db
from briki.repositories.plan_repository import PlanRepository
from briki.schemas.envelope import ApiResponse, ok
from briki.schemas.plans import PlanRead
from briki.services.plan_service import InvalidPlanIdError, PlanNotFoundError, PlanService

router = APIRouter(prefix="/api/plans", tags=["plans"])


def _service(db: Session) -> PlanService:
    return PlanService(repository=PlanRepository(db))


@router.get("", response_model=ApiResponse[list[PlanRead]], response_model_exclude_unset=True)
def list_plans(db: Session = Depends(get_db)) -> dict[str, Any]:
    try:
        plans = _service(db).get_all_plans()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch insurance plans"
        ) from exc
    return ok(plans)


# Registered before /{plan_id} so "filter" and "popular" are not read as ids.
@router.get("/filter", response_model=ApiResponse[list[PlanRead]], response_model_exclude_unset=True)
def filter_plans(
    origin: str | None = Query(default=None),
    destination: str | None = Query(default=None),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    age: str | None = Query(default=None),
    travelers_count: str | None = Query(default=None, alias="travelersCount"),
    min_medical_coverage: str | None = Query(default=None, alias="minMedicalCoverage"),
    include_adventure_activities: str | None = Query(default=None, alias="includeAdventureActivities"),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    try:
        plans = _service(db).filter_plans(
            origin=origin,
            destination=destination,
            start_date=start_date,
            end_date=end_date,
            age=age,
            travelers_count=travelers_count,
            min_medical_coverage=min_medical_coverage,
            include_adventure_activities=include_adventure_activities,
        )
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to filter insurance plans"
        ) from exc
    return ok(plans)


@router.get("/popular", response_model=ApiResponse[list[PlanRead]], response_model_exclude_unset=True)
def popular_plans(
    limit: str | None = Query(default=None, description="Maximum number of plans (default 5)"),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    try:
        plans = _service(db).get_popular_plans(limit)
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch popular insurance plans"
        ) from exc
    return ok(plans)


@router.get("/{plan_id}", response_model=ApiResponse[PlanRead], response_model_exclude_unset=True)
def get_plan(plan_id: str, db: Session = Depends(get_db)) -> dict[str, Any]:
    try:
        plan = _service(db).get_plan_by_id(plan_id)
    except InvalidPlanIdError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found") from exc
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch insurance plan"
        ) from exc
    return ok(plan)
