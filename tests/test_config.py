"""Tests for wsk_fixtures.config – FixtureSettings & load_settings()."""

from __future__ import annotations

import dataclasses

import pytest
from flask import Flask

from wsk_fixtures.config import FixtureSettings, load_settings


def _make_app(**overrides: object) -> Flask:
    """Create a minimal Flask app with WSK_* config overrides."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    for key, value in overrides.items():
        app.config[key] = value
    return app


def _load(**overrides: object) -> FixtureSettings:
    return load_settings(_make_app(**overrides))


class TestDefaults:
    def test_defaults(self) -> None:
        settings = _load()
        assert settings.namespace == "guest"
        assert settings.auto_discover is True
        assert settings.action_packages == ["wsk_fixtures.actions"]
        assert settings.manifest_dir == "manifests/"
        assert settings.default_timeout is None
        assert settings.activation_history == 100
        assert settings.api_enabled is False
        assert settings.api_url_prefix == "/api/v1"
        assert settings.logging_enabled is False
        assert settings.logging_level == "INFO"

    @pytest.mark.parametrize(
        "key",
        [
            "WSK_NAMESPACE",
            "WSK_AUTO_DISCOVER",
            "WSK_ACTION_PACKAGES",
            "WSK_MANIFEST_DIR",
            "WSK_ACTIVATION_HISTORY",
            "WSK_API_ENABLED",
            "WSK_API_URL_PREFIX",
            "WSK_LOGGING_ENABLED",
            "WSK_LOGGING_LEVEL",
        ],
    )
    def test_none_falls_back_to_default(self, key: str) -> None:
        assert _load(**{key: None}) == _load()

    def test_frozen(self) -> None:
        settings = _load()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.namespace = "other"  # type: ignore[misc]

    def test_default_packages_not_shared(self) -> None:
        settings = _load()
        settings.action_packages.append("mutated")
        assert _load().action_packages == ["wsk_fixtures.actions"]


class TestValidValues:
    def test_overrides(self, tmp_path) -> None:
        settings = _load(
            WSK_NAMESPACE="cats@example.com_dev",
            WSK_AUTO_DISCOVER=False,
            WSK_ACTION_PACKAGES=["myapp.actions"],
            WSK_MANIFEST_DIR=tmp_path,
            WSK_DEFAULT_TIMEOUT=1000,
            WSK_ACTIVATION_HISTORY=0,
            WSK_API_ENABLED=True,
            WSK_API_URL_PREFIX="/wsk",
            WSK_LOGGING_ENABLED=True,
            WSK_LOGGING_LEVEL="debug",
        )
        assert settings.namespace == "cats@example.com_dev"
        assert settings.auto_discover is False
        assert settings.action_packages == ["myapp.actions"]
        assert settings.manifest_dir == str(tmp_path)
        assert settings.default_timeout == 1000
        assert settings.activation_history == 0
        assert settings.api_enabled is True
        assert settings.api_url_prefix == "/wsk"
        assert settings.logging_enabled is True
        assert settings.logging_level == "DEBUG"


class TestInvalidValues:
    @pytest.mark.parametrize(
        "key, value",
        [
            ("WSK_NAMESPACE", ""),
            ("WSK_NAMESPACE", "_"),
            ("WSK_NAMESPACE", "has space"),
            ("WSK_NAMESPACE", 3),
            ("WSK_AUTO_DISCOVER", "yes"),
            ("WSK_ACTION_PACKAGES", "wsk_fixtures.actions"),
            ("WSK_ACTION_PACKAGES", [1]),
            ("WSK_MANIFEST_DIR", 5),
            ("WSK_DEFAULT_TIMEOUT", "100"),
            ("WSK_DEFAULT_TIMEOUT", True),
            ("WSK_DEFAULT_TIMEOUT", 50),
            ("WSK_DEFAULT_TIMEOUT", 600001),
            ("WSK_ACTIVATION_HISTORY", -1),
            ("WSK_ACTIVATION_HISTORY", False),
            ("WSK_API_ENABLED", 1),
            ("WSK_API_URL_PREFIX", "api"),
            ("WSK_LOGGING_ENABLED", "true"),
            ("WSK_LOGGING_LEVEL", "verbose"),
            ("WSK_LOGGING_LEVEL", 10),
        ],
    )
    def test_rejected(self, key: str, value: object) -> None:
        with pytest.raises(ValueError, match=key):
            _load(**{key: value})
