"""Deployment bundle writer for wsk-fixtures.

Writes every action into one ``wsk-actions.json`` document laid out the
way the platform's deploy tooling reads a namespace:

    {"namespace": "guest", "actions": [<manifest>, ...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wsk_fixtures.output.base import ManifestWriter

BUNDLE_FILENAME = "wsk-actions.json"


def build_bundle(manifests: list[dict[str, Any]], namespace: str) -> dict[str, Any]:
    """Wrap *manifests* in a namespace bundle.

    Raises:
        ValueError: If two manifests share a name.
    """
    seen: set[str] = set()
    for manifest in manifests:
        if manifest["name"] in seen:
            raise ValueError(f"Duplicate action name in bundle: {manifest['name']!r}")
        seen.add(manifest["name"])
    return {"namespace": namespace, "actions": manifests}


class BundleWriter(ManifestWriter):
    """Generates a single namespace bundle from ActionDescriptor instances."""

    def emit(self, manifests: list[dict[str, Any]], output_path: Path, namespace: str) -> list[Path]:
        file_path = output_path / BUNDLE_FILENAME
        file_path.write_text(
            json.dumps(build_bundle(manifests, namespace), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return [file_path]
