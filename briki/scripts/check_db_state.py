"""Print connection details, table presence and row counts for the plans database."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from sqlalchemy import inspect
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session

from briki.core.config import settings
from briki.core.logging import configure_logging
from briki.db.session import SessionLocal
from briki.repositories.interaction_repository import InteractionRepository
from briki.repositories.plan_repository import PlanRepository


def collect_db_state(session_factory: Callable[[], Session] = SessionLocal) -> dict[str, object]:
    url = make_url(settings.sqlalchemy_database_uri)
    state: dict[str, object] = {
        "host": url.host or "local",
        "database": url.database or "(memory)",
        "ssl": settings.database_ssl,
    }

    db: Session = session_factory()
    try:
        inspector = inspect(db.get_bind())
        has_plans = inspector.has_table("insurance_plans")
        has_interactions = inspector.has_table("plan_interactions")
        state["insurance_plans_table"] = has_plans
        state["plan_interactions_table"] = has_interactions
        state["insurance_plans_rows"] = PlanRepository(db).count_plans() if has_plans else None
        state["plan_interactions_rows"] = InteractionRepository(db).count_interactions() if has_interactions else None
    finally:
        db.close()

    return state


def main() -> None:
    parser = argparse.ArgumentParser(description="Check Briki database connection and schema state")
    parser.parse_args()

    configure_logging(settings.log_level)
    state = collect_db_state()

    print("Database connection info:")
    print(f"  Host: {state['host']}")
    print(f"  Database: {state['database']}")
    print(f"  SSL: {'Enabled' if state['ssl'] else 'Disabled'}")
    print()
    for table in ("insurance_plans", "plan_interactions"):
        exists = state[f"{table}_table"]
        rows = state[f"{table}_rows"]
        if exists:
            print(f"  {table}: present, rows={rows}")
        else:
            print(f"  {table}: MISSING")


if __name__ == "__main__":
    main()
