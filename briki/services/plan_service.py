from __future__ import annotations

from briki.core.constants import DEFAULT_POPULAR_LIMIT
from briki.repositories.plan_repository import PlanFilterCriteria, PlanRepository
from briki.schemas.plans import PlanRead
from briki.services.parsing import clean_optional, parse_flag, parse_int


class PlanValidationError(ValueError):
    pass


class InvalidPlanIdError(PlanValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid plan ID")


class PlanNotFoundError(LookupError):
    pass


class PlanService:
    def __init__(self, repository: PlanRepository) -> None:
        self.repository = repository

    def get_all_plans(self) -> list[PlanRead]:
        return self.repository.get_all_plans()

    def get_plan_by_id(self, raw_id: str | int) -> PlanRead:
        plan_id = parse_int(raw_id)
        if plan_id is None:
            raise InvalidPlanIdError()

        plan = self.repository.get_plan_by_id(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        return plan

    def filter_plans(
        self,
        *,
        origin: str | None = None,
        destination: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        age: str | None = None,
        travelers_count: str | None = None,
        min_medical_coverage: str | None = None,
        include_adventure_activities: str | None = None,
    ) -> list[PlanRead]:
        criteria = PlanFilterCriteria(
            origin=clean_optional(origin),
            destination=clean_optional(destination),
            start_date=clean_optional(start_date),
            end_date=clean_optional(end_date),
            age=parse_int(age),
            travelers_count=parse_int(travelers_count),
            min_medical_coverage=parse_int(min_medical_coverage),
            include_adventure_activities=parse_flag(include_adventure_activities),
        )
        return self.repository.filter_plans(criteria)

    def get_popular_plans(self, raw_limit: str | int | None = None) -> list[PlanRead]:
        limit = parse_int(raw_limit)
        if limit is None or limit < 0:
            limit = DEFAULT_POPULAR_LIMIT
        return self.repository.get_popular_plans(limit)
