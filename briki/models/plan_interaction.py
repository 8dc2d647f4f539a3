"""SQLAlchemy model for plan_interactions.

Each row is one user action against a plan. ``device_id`` is always present so
anonymous visitors can be tracked; ``user_id`` is filled once they sign in.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from briki.db.base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONType = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")


class PlanInteraction(Base):
    __tablename__ = "plan_interactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plan_id: Mapped[int] = mapped_column(Integer, ForeignKey("insurance_plans.id"), nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    device_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    interaction_type: Mapped[str] = mapped_column(String(32), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    # "metadata" is reserved on declarative classes.
    metadata_: Mapped[Any] = mapped_column("metadata", JSONType, nullable=True)

    def __repr__(self) -> str:
        return f"<PlanInteraction id={self.id} plan_id={self.plan_id} type={self.interaction_type}>"
