"""YAML manifest writer for wsk-fixtures.

Writes one ``<name>.action.yaml`` file per action. Characters that are
not safe in file names are replaced with underscores.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from wsk_fixtures.output.base import ManifestWriter

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.\-]")


def manifest_filename(name: str) -> str:
    return f"{_UNSAFE_RE.sub('_', name)}.action.yaml"


class YAMLWriter(ManifestWriter):
    """Generates ``.action.yaml`` manifests from ActionDescriptor instances.

    Each file holds a single action and carries no namespace.
    """

    def emit(self, manifests: list[dict[str, Any]], output_path: Path, namespace: str) -> list[Path]:
        written = []
        for manifest in manifests:
            file_path = output_path / manifest_filename(manifest["name"])
            file_path.write_text(
                yaml.safe_dump(manifest, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
            written.append(file_path)
        return written
