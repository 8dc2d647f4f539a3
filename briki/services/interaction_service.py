from __future__ import annotations

from briki.core.constants import InteractionType
from briki.repositories.interaction_repository import InteractionRepository
from briki.schemas.interactions import InteractionCreate, InteractionRead
from briki.services.parsing import clean_optional, parse_int
from briki.services.plan_service import InvalidPlanIdError


class InteractionValidationError(ValueError):
    pass


class MissingInteractionFieldsError(InteractionValidationError):
    def __init__(self) -> None:
        super().__init__("Missing required fields: planId, deviceId, and interactionType are required")


class InvalidInteractionTypeError(InteractionValidationError):
    def __init__(self) -> None:
        super().__init__(f"Invalid interactionType. Must be one of: {', '.join(InteractionType.values())}")


class MissingIdentifierError(InteractionValidationError):
    def __init__(self) -> None:
        super().__init__("At least one of userId or deviceId must be provided")


class InteractionService:
    def __init__(self, repository: InteractionRepository) -> None:
        self.repository = repository

    def record_interaction(self, payload: InteractionCreate) -> InteractionRead:
        device_id = clean_optional(payload.device_id)
        interaction_type = clean_optional(payload.interaction_type)
        if not payload.plan_id or not device_id or not interaction_type:
            raise MissingInteractionFieldsError()

        if interaction_type not in InteractionType.values():
            raise InvalidInteractionTypeError()

        return self.repository.create_interaction(
            payload.plan_id,
            device_id,
            InteractionType(interaction_type),
            user_id=clean_optional(payload.user_id),
            metadata=payload.metadata,
        )

    def get_plan_interactions(self, raw_plan_id: str | int) -> list[InteractionRead]:
        plan_id = parse_int(raw_plan_id)
        if plan_id is None:
            raise InvalidPlanIdError()
        return self.repository.get_interactions_by_plan(plan_id)

    def get_user_interactions(self, user_id: str | None, device_id: str | None) -> list[InteractionRead]:
        user_id = clean_optional(user_id)
        device_id = clean_optional(device_id)
        if user_id is None and device_id is None:
            raise MissingIdentifierError()
        return self.repository.get_interactions_by_user(user_id, device_id)
