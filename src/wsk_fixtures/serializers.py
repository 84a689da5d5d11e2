"""Shared serialization functions for actions and activations.

Pure functions with no Flask dependency. Used by the manifest writers,
the CLI and the API Blueprint.
"""

from __future__ import annotations

import dataclasses
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wsk_fixtures.descriptor import ActionDescriptor
    from wsk_fixtures.invoker import Activation


def to_key_value_list(mapping: dict[str, Any]) -> list[dict[str, Any]]:
    """Convert a dict to the platform's ``[{"key": k, "value": v}]`` form."""
    return [{"key": k, "value": v} for k, v in mapping.items()]


def from_key_value_list(items: list[dict[str, Any]]) -> dict[str, Any]:
    """Inverse of to_key_value_list().

    Raises:
        ValueError: If an entry has no ``key``.
    """
    result: dict[str, Any] = {}
    for item in items:
        if not isinstance(item, dict) or "key" not in item:
            raise ValueError(f"Expected a {{'key': ..., 'value': ...}} entry. Got: {item!r}")
        result[item["key"]] = item.get("value")
    return result


def parse_param_value(raw: str) -> Any:
    """Parse a command-line parameter value.

    Valid JSON is decoded (so ``7`` is an int and ``"7"`` a string);
    anything else is kept as the raw string.
    """
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def action_to_summary(descriptor: ActionDescriptor, namespace: str) -> dict[str, Any]:
    """Short listing entry for an action."""
    return {
        "name": descriptor.name,
        "namespace": namespace,
        "version": descriptor.version,
        "publish": descriptor.publish,
        "description": descriptor.description,
        "kind": descriptor.kind,
    }


def action_to_manifest(descriptor: ActionDescriptor) -> dict[str, Any]:
    """Deployment manifest for an action.

    Parameters and annotations use the platform's key/value list form.
    """
    return {
        "name": descriptor.name,
        "version": descriptor.version,
        "publish": descriptor.publish,
        "exec": {
            "kind": descriptor.kind,
            "main": descriptor.main,
        },
        "limits": dataclasses.asdict(descriptor.limits),
        "parameters": to_key_value_list(descriptor.parameters),
        "annotations": to_key_value_list(descriptor.annotations),
    }


def action_to_detail(descriptor: ActionDescriptor, namespace: str) -> dict[str, Any]:
    """Manifest plus description and JSON schemas."""
    return {
        **action_to_manifest(descriptor),
        "namespace": namespace,
        "description": descriptor.description,
        "input_schema": descriptor.input_schema,
        "output_schema": descriptor.output_schema,
    }


def activation_to_dict(activation: Activation) -> dict[str, Any]:
    """Activation record in the platform's camelCase layout."""
    return {
        "activationId": activation.activation_id,
        "name": activation.action_name,
        "namespace": activation.namespace,
        "start": activation.start,
        "end": activation.end,
        "duration": activation.duration,
        "response": {
            "status": activation.status,
            "success": activation.success,
            "result": activation.result,
        },
    }
