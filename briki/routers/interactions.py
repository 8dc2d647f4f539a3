"""Plan interaction routes.

Interactions are anonymous-friendly: every event carries a device id, and a
user id once the visitor is signed in.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from briki.db.session import get_db
from briki.repositories.interaction_repository import InteractionRepository
from briki.schemas.envelope import ApiResponse, ok
from briki.schemas.interactions import InteractionCreate, InteractionRead
from briki.services.interaction_service import InteractionService, InteractionValidationError
from briki.services.plan_service import InvalidPlanIdError

router = APIRouter(prefix="/api/interactions", tags=["interactions"])


def _service(db: Session) -> InteractionService:
    return InteractionService(repository=InteractionRepository(db))


@router.post(
    "",
    response_model=ApiResponse[InteractionRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def record_interaction(payload: InteractionCreate, db: Session = Depends(get_db)) -> dict[str, Any]:
    try:
        interaction = _service(db).record_interaction(payload)
    except InteractionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to record interaction"
        ) from exc
    return ok(interaction, message="Interaction recorded successfully")


@router.get(
    "/plan/{plan_id}",
    response_model=ApiResponse[list[InteractionRead]],
    response_model_exclude_unset=True,
)
def plan_interactions(plan_id: str, db: Session = Depends(get_db)) -> dict[str, Any]:
    try:
        interactions = _service(db).get_plan_interactions(plan_id)
    except InvalidPlanIdError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch plan interactions"
        ) from exc
    return ok(interactions)


@router.get(
    "/user",
    response_model=ApiResponse[list[InteractionRead]],
    response_model_exclude_unset=True,
)
def user_interactions(
    user_id: str | None = Query(default=None, alias="userId"),
    device_id: str | None = Query(default=None, alias="deviceId"),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    try:
        interactions = _service(db).get_user_interactions(user_id, device_id)
    except InteractionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch user interactions"
        ) from exc
    return ok(interactions)
