from __future__ import annotations

from briki.data.sample_plans import SAMPLE_PLANS
from briki.scripts.check_db_state import collect_db_state
from briki.scripts.startup_bootstrap import bootstrap


def test_bootstrap_is_idempotent(session_factory):
    assert bootstrap(session_factory) == len(SAMPLE_PLANS)
    assert bootstrap(session_factory) == 0


def test_collect_db_state(session_factory):
    before = collect_db_state(session_factory)
    assert before["insurance_plans_table"] is False
    assert before["insurance_plans_rows"] is None

    bootstrap(session_factory)
    after = collect_db_state(session_factory)

    assert after["insurance_plans_table"] is True
    assert after["plan_interactions_table"] is True
    assert after["insurance_plans_rows"] == len(SAMPLE_PLANS)
    assert after["plan_interactions_rows"] == 0
