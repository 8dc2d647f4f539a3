from __future__ import annotations

import pytest

from briki.core.constants import DEFAULT_POPULAR_LIMIT, InteractionType
from briki.schemas.interactions import InteractionCreate
from briki.services.interaction_service import (
    InteractionService,
    InvalidInteractionTypeError,
    MissingIdentifierError,
    MissingInteractionFieldsError,
)
from briki.services.parsing import parse_flag, parse_int
from briki.services.plan_service import InvalidPlanIdError, PlanNotFoundError, PlanService


class FakePlanRepository:
    def __init__(self) -> None:
        self.criteria = None
        self.limit = None

    def get_plan_by_id(self, plan_id):
        return None

    def filter_plans(self, criteria):
        self.criteria = criteria
        return []

    def get_popular_plans(self, limit):
        self.limit = limit
        return []


class FakeInteractionRepository:
    def __init__(self) -> None:
        self.calls = []

    def create_interaction(self, plan_id, device_id, interaction_type, user_id=None, metadata=None):
        self.calls.append((plan_id, device_id, interaction_type, user_id, metadata))
        return "created"

    def get_interactions_by_user(self, user_id=None, device_id=None):
        self.calls.append((user_id, device_id))
        return []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12", 12),
        (" 7 ", 7),
        ("-3", -3),
        (5, 5),
        ("abc", None),
        ("1.5", 1),
        ("100000.0", 100000),
        ("1abc", 1),
        ("", None),
        (None, None),
    ],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_parse_flag():
    assert parse_flag("true") is True
    assert parse_flag("TRUE") is True
    assert parse_flag("false") is False
    assert parse_flag("yes") is False
    assert parse_flag(None) is None


def test_get_plan_by_id_errors():
    service = PlanService(FakePlanRepository())

    with pytest.raises(InvalidPlanIdError, match="Invalid plan ID"):
        service.get_plan_by_id("abc")
    with pytest.raises(PlanNotFoundError):
        service.get_plan_by_id("42")


def test_filter_plans_builds_criteria():
    repo = FakePlanRepository()

    PlanService(repo).filter_plans(
        destination=" Spain ",
        age="30",
        travelers_count="two",
        min_medical_coverage="50000",
        include_adventure_activities="true",
    )

    criteria = repo.criteria
    assert criteria.destination == "Spain"
    assert criteria.age == 30
    assert criteria.travelers_count is None
    assert criteria.min_medical_coverage == 50000
    assert criteria.include_adventure_activities is True
    assert criteria.origin is None


def test_filter_plans_absent_flag_is_not_applied():
    repo = FakePlanRepository()

    PlanService(repo).filter_plans()

    assert repo.criteria.include_adventure_activities is None


@pytest.mark.parametrize(("raw", "expected"), [(None, DEFAULT_POPULAR_LIMIT), ("x", 5), ("-1", 5), ("3", 3), ("0", 0)])
def test_popular_limit_parsing(raw, expected):
    repo = FakePlanRepository()

    PlanService(repo).get_popular_plans(raw)

    assert repo.limit == expected


def test_record_interaction_validation():
    service = InteractionService(FakeInteractionRepository())

    with pytest.raises(MissingInteractionFieldsError):
        service.record_interaction(InteractionCreate(plan_id=1, device_id="  ", interaction_type="view"))
    with pytest.raises(MissingInteractionFieldsError):
        service.record_interaction(InteractionCreate(plan_id=0, device_id="d", interaction_type="view"))
    with pytest.raises(InvalidInteractionTypeError):
        service.record_interaction(InteractionCreate(plan_id=1, device_id="d", interaction_type="purchase"))


def test_record_interaction_passes_cleaned_values():
    repo = FakeInteractionRepository()

    result = InteractionService(repo).record_interaction(
        InteractionCreate.model_validate(
            {"planId": 3, "deviceId": " d-1 ", "interactionType": "comparison", "userId": "", "metadata": {"a": 1}}
        )
    )

    assert result == "created"
    assert repo.calls == [(3, "d-1", InteractionType.COMPARISON, None, {"a": 1})]


def test_user_interactions_requires_an_identifier():
    repo = FakeInteractionRepository()
    service = InteractionService(repo)

    with pytest.raises(MissingIdentifierError):
        service.get_user_interactions(None, " ")

    service.get_user_interactions(None, "device-1")
    assert repo.calls == [(None, "device-1")]
