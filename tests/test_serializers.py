"""Tests for wsk_fixtures.serializers."""

from __future__ import annotations

import pytest

from wsk_fixtures.actions import fetch_cat
from wsk_fixtures.descriptor import ActionDescriptor
from wsk_fixtures.invoker import Activation
from wsk_fixtures.serializers import (
    action_to_detail,
    action_to_manifest,
    action_to_summary,
    activation_to_dict,
    from_key_value_list,
    parse_param_value,
    to_key_value_list,
)


async def _noop(params):
    return {}


class TestKeyValueLists:
    def test_to_list(self):
        assert to_key_value_list({"web-export": True, "final": True}) == [
            {"key": "web-export", "value": True},
            {"key": "final", "value": True},
        ]

    def test_from_list(self):
        items = [{"key": "raw-http", "value": False}, {"key": "empty"}]
        assert from_key_value_list(items) == {"raw-http": False, "empty": None}

    def test_from_list_rejects_missing_key(self):
        with pytest.raises(ValueError):
            from_key_value_list([{"value": 1}])


class TestParseParamValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("7", 7),
            ('"7"', "7"),
            ("true", True),
            ("null", None),
            ('{"a": 1}', {"a": 1}),
            ("Whiskers", "Whiskers"),
            ("", ""),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_param_value(raw) == expected


class TestActionSerialization:
    def test_manifest(self):
        d = ActionDescriptor(
            name="noop",
            func=_noop,
            parameters={"greeting": "hi"},
            annotations={"web-export": True},
        )
        assert action_to_manifest(d) == {
            "name": "noop",
            "version": "0.0.1",
            "publish": False,
            "exec": {"kind": "python:3", "main": "main"},
            "limits": {"timeout": 60000, "memory": 256},
            "parameters": [{"key": "greeting", "value": "hi"}],
            "annotations": [{"key": "web-export", "value": True}],
        }

    def test_summary(self):
        summary = action_to_summary(fetch_cat.wsk_action, "guest")
        assert summary["name"] == "fetch-cat"
        assert summary["namespace"] == "guest"
        assert summary["description"] == "Fetch a cat by id."

    def test_detail_includes_schemas(self):
        detail = action_to_detail(fetch_cat.wsk_action, "guest")
        assert detail["exec"] == {"kind": "python:3", "main": "fetch_cat_main"}
        assert "id" in detail["input_schema"]["properties"]
        assert "color" in detail["output_schema"]["properties"]


class TestActivationSerialization:
    def test_layout(self):
        activation = Activation(
            activation_id="abc",
            action_name="fetch-cat",
            namespace="guest",
            status="application error",
            result={"error": "id parameter not set."},
            start=10,
            end=15,
        )
        assert activation_to_dict(activation) == {
            "activationId": "abc",
            "name": "fetch-cat",
            "namespace": "guest",
            "start": 10,
            "end": 15,
            "duration": 5,
            "response": {
                "status": "application error",
                "success": False,
                "result": {"error": "id parameter not set."},
            },
        }
