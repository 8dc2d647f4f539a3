from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from briki.core.config import settings
from briki.core.logging import configure_logging
from briki.db.session import SessionLocal
from briki.repositories.plan_repository import PlanRepository

logger = logging.getLogger(__name__)


def bootstrap(session_factory: Callable[[], Session] = SessionLocal) -> int:
    """Create the plan tables and seed sample plans on an empty database.

    Safe to run on every start. Failures propagate so a service that cannot
    reach its database does not come up.
    """
    db: Session = session_factory()
    try:
        seeded = PlanRepository(db).initialize_db()
    finally:
        db.close()

    if seeded:
        logger.info("Startup bootstrap seeded %s sample plans", seeded)
    else:
        logger.info("Startup bootstrap found existing plans; seeding skipped")
    return seeded


def main() -> None:
    parser = argparse.ArgumentParser(description="Create Briki plan tables and seed sample plans")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (defaults to LOG_LEVEL)",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)
    bootstrap()


if __name__ == "__main__":
    main()
