from __future__ import annotations

import pytest
from sqlalchemy.exc import SQLAlchemyError

from briki.core.constants import InteractionType
from briki.repositories.interaction_repository import InteractionRepository
from briki.repositories.plan_repository import PlanRepository


@pytest.fixture()
def plan_id(seeded_db) -> int:
    return PlanRepository(seeded_db).get_all_plans()[0].id


def test_create_interaction_returns_generated_fields(seeded_db, plan_id):
    repo = InteractionRepository(seeded_db)

    created = repo.create_interaction(
        plan_id,
        "device-1",
        InteractionType.CHECKOUT_START,
        user_id="user-1",
        metadata={"source": "compare", "position": 2},
    )

    assert created.id > 0
    assert created.plan_id == plan_id
    assert created.user_id == "user-1"
    assert created.device_id == "device-1"
    assert created.interaction_type == "checkout_start"
    assert created.metadata == {"source": "compare", "position": 2}
    assert created.timestamp is not None


def test_create_interaction_without_metadata_stores_null(seeded_db, plan_id):
    created = InteractionRepository(seeded_db).create_interaction(plan_id, "device-1", "view")

    assert created.metadata is None
    assert created.user_id is None


def test_create_interaction_for_unknown_plan_fails(seeded_db):
    with pytest.raises(SQLAlchemyError):
        InteractionRepository(seeded_db).create_interaction(99999, "device-1", "view")


def test_interactions_by_plan_newest_first(seeded_db, plan_id):
    repo = InteractionRepository(seeded_db)
    first = repo.create_interaction(plan_id, "device-1", "view")
    second = repo.create_interaction(plan_id, "device-2", "selection")

    rows = repo.get_interactions_by_plan(plan_id)

    assert [r.id for r in rows] == [second.id, first.id]


def test_interactions_by_user_matches_either_identifier(seeded_db, plan_id):
    repo = InteractionRepository(seeded_db)
    repo.create_interaction(plan_id, "device-1", "view", user_id="user-1")
    repo.create_interaction(plan_id, "device-2", "view")
    repo.create_interaction(plan_id, "device-3", "view", user_id="user-9")

    assert len(repo.get_interactions_by_user(user_id="user-1")) == 1
    assert len(repo.get_interactions_by_user(device_id="device-2")) == 1
    assert len(repo.get_interactions_by_user(user_id="user-1", device_id="device-2")) == 2


def test_interactions_by_user_without_identifiers_matches_nothing(seeded_db, plan_id):
    repo = InteractionRepository(seeded_db)
    repo.create_interaction(plan_id, "device-1", "view")

    assert repo.get_interactions_by_user() == []
