from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from briki.core.constants import InteractionType
from briki.models.plan_interaction import PlanInteraction
from briki.repositories import queries
from briki.schemas.interactions import InteractionRead

logger = logging.getLogger(__name__)


def map_interaction_row(row: PlanInteraction) -> InteractionRead:
    return InteractionRead(
        id=row.id,
        plan_id=row.plan_id,
        user_id=row.user_id,
        device_id=row.device_id,
        interaction_type=row.interaction_type,
        timestamp=row.timestamp,
        metadata=row.metadata_,
    )


class InteractionRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create_interaction(
        self,
        plan_id: int,
        device_id: str,
        interaction_type: InteractionType,
        user_id: str | None = None,
        metadata: Any = None,
    ) -> InteractionRead:
        row = PlanInteraction(
            plan_id=plan_id,
            user_id=user_id or None,
            device_id=device_id,
            interaction_type=InteractionType(interaction_type).value,
            metadata_=metadata,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error creating interaction plan_id=%s type=%s", plan_id, interaction_type)
            raise
        return map_interaction_row(row)

    def get_interactions_by_plan(self, plan_id: int) -> list[InteractionRead]:
        try:
            rows = self.db.execute(queries.interactions_by_plan(plan_id)).scalars().all()
        except SQLAlchemyError:
            logger.exception("Error fetching interactions for plan_id=%s", plan_id)
            raise
        return [map_interaction_row(r) for r in rows]

    def get_interactions_by_user(
        self,
        user_id: str | None = None,
        device_id: str | None = None,
    ) -> list[InteractionRead]:
        try:
            rows = self.db.execute(queries.interactions_by_user(user_id or None, device_id or None)).scalars().all()
        except SQLAlchemyError:
            logger.exception("Error fetching interactions for user/device")
            raise
        return [map_interaction_row(r) for r in rows]

    def count_interactions(self) -> int:
        try:
            return int(self.db.execute(queries.interaction_count()).scalar_one())
        except SQLAlchemyError:
            logger.exception("Error counting plan interactions")
            raise
