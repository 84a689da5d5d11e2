"""Tests for wsk_fixtures.registry – ActionRegistry and app-scoped accessors."""

from __future__ import annotations

import pytest
from flask import Flask

from wsk_fixtures.descriptor import ActionDescriptor
from wsk_fixtures.registry import ActionRegistry, get_invoker, get_registry


async def _noop(params):
    return {}


def _descriptor(name: str) -> ActionDescriptor:
    return ActionDescriptor(name=name, func=_noop)


class TestActionRegistry:
    def test_register_and_get(self):
        registry = ActionRegistry()
        d = _descriptor("a")
        registry.register(d)
        assert registry.get("a") is d
        assert "a" in registry
        assert registry.count == 1

    def test_get_unknown_returns_none(self):
        assert ActionRegistry().get("missing") is None

    def test_duplicate_rejected(self):
        registry = ActionRegistry()
        registry.register(_descriptor("a"))
        with pytest.raises(ValueError, match="already registered"):
            registry.register(_descriptor("a"))

    def test_unregister(self):
        registry = ActionRegistry()
        registry.register(_descriptor("a"))
        assert registry.unregister("a") is True
        assert registry.unregister("a") is False
        assert registry.count == 0

    def test_names_and_iter_sorted(self):
        registry = ActionRegistry()
        for name in ("c", "a", "b"):
            registry.register(_descriptor(name))
        assert registry.names == ["a", "b", "c"]
        assert [name for name, _ in registry.iter()] == ["a", "b", "c"]


class TestAccessors:
    def test_uninitialized_raises(self):
        app = Flask(__name__)
        with pytest.raises(RuntimeError, match="not initialized"):
            get_registry(app)
        with pytest.raises(RuntimeError, match="not initialized"):
            get_invoker(app)

    def test_registry_from_current_app(self, initialized_app):
        with initialized_app.app_context():
            assert get_registry() is initialized_app.extensions["wsk_fixtures"]["registry"]

    def test_invoker_created_once(self, initialized_app):
        first = get_invoker(initialized_app)
        assert get_invoker(initialized_app) is first
        assert first.registry is get_registry(initialized_app)

    def test_invoker_uses_namespace_and_timeout(self, app):
        from wsk_fixtures import WskFixtures

        app.config["WSK_NAMESPACE"] = "cats"
        app.config["WSK_DEFAULT_TIMEOUT"] = 5000
        WskFixtures(app)
        invoker = get_invoker(app)
        assert invoker.namespace == "cats"
        assert invoker.timeout_override == 5000

    def test_invoker_records_activations(self, initialized_app):
        get_invoker(initialized_app).invoke("fetch-cat", {"id": 1})
        store = initialized_app.extensions["wsk_fixtures"]["activations"]
        assert len(store) == 1
