"""Unit tests for environment parsing and config selection."""

from __future__ import annotations

import pytest
from chirpy.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    ensure_secrets,
    env_bool,
    env_int,
    get_config,
)
from chirpy.factory import create_app


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("ON", True), ("0", False), ("off", False)])
def test_env_bool_parses_common_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv("CHIRPY_FLAG", raw)
    assert env_bool("CHIRPY_FLAG") is expected


def test_env_bool_and_int_fall_back_to_defaults(monkeypatch):
    monkeypatch.delenv("CHIRPY_FLAG", raising=False)
    monkeypatch.setenv("CHIRPY_NUMBER", "  ")

    assert env_bool("CHIRPY_FLAG", default=True) is True
    assert env_int("CHIRPY_NUMBER", 42) == 42


@pytest.mark.parametrize(
    "name,expected",
    [("testing", TestingConfig), ("production", ProductionConfig), ("unknown", DevelopmentConfig)],
)
def test_get_config_follows_app_env(monkeypatch, name, expected):
    monkeypatch.setenv("APP_ENV", name)
    assert get_config() is expected


def test_testing_config_runs_as_dev_platform():
    assert TestingConfig.PLATFORM == "dev"
    assert TestingConfig.ACCESS_TOKEN_TTL_SECONDS == 3600
    assert TestingConfig.REFRESH_TOKEN_TTL_DAYS == 60


@pytest.mark.parametrize(
    "overrides,missing",
    [
        ({"JWT_SECRET": "", "POLKA_KEY": "real-polka-key"}, "JWT_SECRET"),
        ({"JWT_SECRET": "real-jwt-secret", "POLKA_KEY": None}, "POLKA_KEY"),
        ({"JWT_SECRET": "CHANGE_ME_JWT_SECRET_AT_LEAST_32_BYTES", "POLKA_KEY": "k"}, "JWT_SECRET"),
        ({"JWT_SECRET": "s", "POLKA_KEY": "CHANGE_ME_POLKA"}, "POLKA_KEY"),
    ],
)
def test_ensure_secrets_rejects_unset_or_placeholder_values(overrides, missing):
    with pytest.raises(RuntimeError, match=missing):
        ensure_secrets({"TESTING": False, **overrides})


def test_ensure_secrets_accepts_real_values_and_skips_testing():
    ensure_secrets({"JWT_SECRET": "real-jwt-secret", "POLKA_KEY": "real-polka-key"})
    ensure_secrets({"TESTING": True, "JWT_SECRET": "", "POLKA_KEY": ""})


def test_production_app_refuses_to_start_with_default_secrets():
    class UnconfiguredProduction(ProductionConfig):
        JWT_SECRET = "CHANGE_ME_JWT_SECRET_AT_LEAST_32_BYTES"
        POLKA_KEY = ""

    with pytest.raises(RuntimeError, match="JWT_SECRET, POLKA_KEY"):
        create_app(UnconfiguredProduction, instance_relative_config=False)
