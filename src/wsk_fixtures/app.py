"""Ready-to-run local host for the cat fixtures.

    flask --app wsk_fixtures.app run
    flask --app wsk_fixtures.app wsk invoke fetch-cat -p id 7
"""

from __future__ import annotations

from typing import Any

from flask import Flask

from wsk_fixtures.extension import WskFixtures


def create_app(config: dict[str, Any] | None = None) -> Flask:
    app = Flask("wsk_fixtures")
    app.config.update(
        WSK_API_ENABLED=True,
        WSK_LOGGING_ENABLED=True,
    )
    # FLASK_WSK_* environment variables (JSON-decoded) override the defaults.
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)
    WskFixtures(app)
    return app
