from __future__ import annotations

import logging

import pytest

from briki.core.config import Settings
from briki.core.logging import resolve_level


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_missing_database_url_fails_fast():
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        _ = _settings(database_url="  ").sqlalchemy_database_uri


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("postgres://u:p@db:5432/briki", "postgresql+psycopg2://u:p@db:5432/briki"),
        ("postgresql://u:p@db:5432/briki", "postgresql+psycopg2://u:p@db:5432/briki"),
        ("postgresql+psycopg2://u:p@db/briki", "postgresql+psycopg2://u:p@db/briki"),
        ("sqlite://", "sqlite://"),
    ],
)
def test_database_url_normalization(raw, expected):
    assert _settings(database_url=raw).sqlalchemy_database_uri == expected


def test_cors_origins_split():
    assert _settings(cors_origin="https://briki.app, http://localhost:5173").cors_origins == [
        "https://briki.app",
        "http://localhost:5173",
    ]
    assert _settings(cors_origin="").cors_origins == ["*"]


def test_environment_from_node_env(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.setenv("NODE_ENV", "production")

    assert _settings().app_env == "production"
    assert _settings().is_production


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO
    assert resolve_level(None) == logging.INFO
