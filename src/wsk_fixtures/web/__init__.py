"""Invocation API Blueprint for wsk-fixtures."""

from __future__ import annotations

from flask import Blueprint


def create_api_blueprint(url_prefix: str = "/api/v1") -> Blueprint:
    bp = Blueprint("wsk_api", __name__, url_prefix=url_prefix)

    from wsk_fixtures.web.api import register_api_routes

    register_api_routes(bp)

    return bp
