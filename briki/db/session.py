"""SQLAlchemy engine and session management.

One engine (and its connection pool) is created per process. Repositories never
import it directly; they receive a ``Session`` so tests can bind their own engine.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker

from briki.core.config import Settings, settings


def build_engine(config: Settings) -> Engine:
    url = make_url(config.sqlalchemy_database_uri)

    engine_kwargs: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_recycle": config.db_pool_recycle_seconds,
        "echo": config.sql_echo,
    }

    if url.get_backend_name() == "postgresql":
        engine_kwargs["pool_size"] = config.db_pool_size
        engine_kwargs["max_overflow"] = config.db_max_overflow

        sslmode = (dict(url.query).get("sslmode") or "").lower()
        if config.database_ssl or sslmode == "require":
            engine_kwargs["connect_args"] = {"sslmode": "require"}

    return create_engine(url, **engine_kwargs)


engine = build_engine(settings)

SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
    autoflush=False,
)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
