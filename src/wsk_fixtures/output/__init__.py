"""Manifest writer subpackage for wsk-fixtures.

Provides get_writer() factory for selecting output format.

YAML writer emits one ``<name>.action.yaml`` per action.
JSON writer emits a single ``wsk-actions.json`` namespace bundle.
"""

from __future__ import annotations


def get_writer(output_format: str = "yaml"):
    """Return a writer instance for the given format.

    Args:
        output_format: "yaml" for per-action YAML files, "json" for a
            single namespace bundle.

    Returns:
        A YAMLWriter or BundleWriter instance.

    Raises:
        ValueError: If format is unknown.
    """
    if output_format == "yaml":
        from wsk_fixtures.output.yaml_writer import YAMLWriter

        return YAMLWriter()
    elif output_format == "json":
        from wsk_fixtures.output.bundle_writer import BundleWriter

        return BundleWriter()
    else:
        raise ValueError(f"Unknown output format: {output_format!r}")
