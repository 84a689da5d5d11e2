"""Shared test fixtures for wsk-fixtures."""

from __future__ import annotations

import pytest
from flask import Flask


@pytest.fixture()
def app(tmp_path):
    """Minimal Flask app with the cat fixtures discoverable."""
    a = Flask(__name__)
    a.config["TESTING"] = True
    a.config["WSK_MANIFEST_DIR"] = str(tmp_path / "manifests")
    return a


@pytest.fixture()
def initialized_app(app):
    """Flask app with WskFixtures initialized (cat fixtures registered)."""
    from wsk_fixtures import WskFixtures

    WskFixtures(app)
    return app


@pytest.fixture()
def api_app(app):
    """Flask app with the invocation API mounted."""
    from wsk_fixtures import WskFixtures

    app.config["WSK_API_ENABLED"] = True
    WskFixtures(app)
    return app


@pytest.fixture()
def client(api_app):
    return api_app.test_client()
