from __future__ import annotations

import importlib

import pytest

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.core.enums import StrategyKind
from src.class_attendance.class_attendance.core.exceptions import InvalidToleranceRange, UnrecognizedStrategyKind
from src.class_attendance.class_attendance.database.connection import DatabaseConnection


@pytest.fixture(autouse=True)
def reset_connection_singleton():
    DatabaseConnection._instance = None
    yield
    DatabaseConnection._instance = None


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("whatever", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_testing_settings_expose_group_defaults():
    settings = importlib.import_module("config.testing")
    assert settings.DEFAULT_TOLERANCE_MINUTES == 10
    assert settings.DEFAULT_STRATEGY_KIND == "STANDARD_LATE_WINDOW"
    assert settings.DB_CONFIG["database"]


def test_build_container_wires_services_without_connecting():
    container = build_container(
        db_config={"host": "localhost", "user": "u", "password": "p", "database": "d"},
        default_tolerance=15,
        default_strategy="STANDARD_PRESENT",
    )

    assert container.conn.config.database == "d"
    assert container.conn.config.port == 3306
    assert container.group_config_service._default_tolerance == 15
    assert container.group_config_service._default_strategy == StrategyKind.STANDARD_PRESENT


def test_build_container_rejects_bad_defaults():
    db_config = {"host": "localhost", "user": "u", "password": "p", "database": "d"}
    with pytest.raises(InvalidToleranceRange):
        build_container(db_config=db_config, default_tolerance=120)
    with pytest.raises(UnrecognizedStrategyKind):
        build_container(db_config=db_config, default_strategy="SOMETIMES")
