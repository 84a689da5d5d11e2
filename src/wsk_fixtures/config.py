"""WSK_* settings resolution and validation.

Reads all WSK_* settings from Flask's app.config, applies defaults,
validates types and values, and exposes a frozen dataclass for internal use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from wsk_fixtures.descriptor import MAX_TIMEOUT, MIN_TIMEOUT

if TYPE_CHECKING:
    from flask import Flask

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_NAMESPACE = "guest"
DEFAULT_AUTO_DISCOVER = True
DEFAULT_ACTION_PACKAGES = ["wsk_fixtures.actions"]
DEFAULT_MANIFEST_DIR = "manifests/"
DEFAULT_ACTIVATION_HISTORY = 100

DEFAULT_API_ENABLED = False
DEFAULT_API_URL_PREFIX = "/api/v1"

DEFAULT_LOGGING_ENABLED = False
DEFAULT_LOGGING_LEVEL = "INFO"

# ---------------------------------------------------------------------------
# Valid choices
# ---------------------------------------------------------------------------
VALID_LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_NAMESPACE_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_@.\-]*$")


@dataclass(frozen=True)
class FixtureSettings:
    """Validated WSK_* settings.

    All fields are immutable after validation. Created by load_settings().
    """

    namespace: str
    auto_discover: bool
    action_packages: list[str]
    manifest_dir: str
    default_timeout: int | None
    activation_history: int

    api_enabled: bool
    api_url_prefix: str

    logging_enabled: bool
    logging_level: str


def load_settings(app: Flask) -> FixtureSettings:
    """Read and validate WSK_* settings from app.config.

    Each Flask config key is ``WSK_`` + uppercase field name
    (e.g. ``WSK_NAMESPACE``).  ``None`` values fall back to defaults.

    Args:
        app: Flask application instance.

    Returns:
        Validated, frozen FixtureSettings dataclass.

    Raises:
        ValueError: If any setting is invalid.
    """
    # --- namespace ---
    namespace = app.config.get("WSK_NAMESPACE", DEFAULT_NAMESPACE)
    if namespace is None:
        namespace = DEFAULT_NAMESPACE
    if not isinstance(namespace, str) or not _NAMESPACE_RE.match(namespace) or namespace == "_":
        raise ValueError(f"WSK_NAMESPACE must be a valid namespace name. Got: {namespace!r}")

    # --- auto_discover ---
    auto_discover = app.config.get("WSK_AUTO_DISCOVER", DEFAULT_AUTO_DISCOVER)
    if auto_discover is None:
        auto_discover = DEFAULT_AUTO_DISCOVER
    if not isinstance(auto_discover, bool):
        actual = type(auto_discover).__name__
        raise ValueError(f"WSK_AUTO_DISCOVER must be a boolean. Got: {actual}")

    # --- action_packages ---
    action_packages = app.config.get("WSK_ACTION_PACKAGES", DEFAULT_ACTION_PACKAGES)
    if action_packages is None:
        action_packages = DEFAULT_ACTION_PACKAGES
    if not isinstance(action_packages, list) or not all(isinstance(p, str) for p in action_packages):
        raise ValueError("WSK_ACTION_PACKAGES must be a list of dotted path strings.")
    action_packages = list(action_packages)

    # --- manifest_dir ---
    manifest_dir = app.config.get("WSK_MANIFEST_DIR", DEFAULT_MANIFEST_DIR)
    if manifest_dir is None:
        manifest_dir = DEFAULT_MANIFEST_DIR
    if not isinstance(manifest_dir, (str, Path)):
        actual = type(manifest_dir).__name__
        raise ValueError(f"WSK_MANIFEST_DIR must be a string path. Got: {actual}")
    manifest_dir = str(manifest_dir)

    # --- default_timeout ---
    default_timeout = app.config.get("WSK_DEFAULT_TIMEOUT", None)
    if default_timeout is not None:
        if not isinstance(default_timeout, int) or isinstance(default_timeout, bool):
            actual = type(default_timeout).__name__
            raise ValueError(f"WSK_DEFAULT_TIMEOUT must be an integer. Got: {actual}")
        if not (MIN_TIMEOUT <= default_timeout <= MAX_TIMEOUT):
            raise ValueError(
                f"WSK_DEFAULT_TIMEOUT must be between {MIN_TIMEOUT} and {MAX_TIMEOUT}." f" Got: {default_timeout}"
            )

    # --- activation_history ---
    activation_history = app.config.get("WSK_ACTIVATION_HISTORY", DEFAULT_ACTIVATION_HISTORY)
    if activation_history is None:
        activation_history = DEFAULT_ACTIVATION_HISTORY
    if not isinstance(activation_history, int) or isinstance(activation_history, bool) or activation_history < 0:
        raise ValueError(f"WSK_ACTIVATION_HISTORY must be a non-negative integer. Got: {activation_history!r}")

    # --- api_enabled ---
    api_enabled = app.config.get("WSK_API_ENABLED", DEFAULT_API_ENABLED)
    if api_enabled is None:
        api_enabled = DEFAULT_API_ENABLED
    if not isinstance(api_enabled, bool):
        actual = type(api_enabled).__name__
        raise ValueError(f"WSK_API_ENABLED must be a boolean. Got: {actual}")

    # --- api_url_prefix ---
    api_url_prefix = app.config.get("WSK_API_URL_PREFIX", DEFAULT_API_URL_PREFIX)
    if api_url_prefix is None:
        api_url_prefix = DEFAULT_API_URL_PREFIX
    if not isinstance(api_url_prefix, str) or not api_url_prefix.startswith("/"):
        raise ValueError("WSK_API_URL_PREFIX must be a string starting with '/'.")

    # --- logging_enabled ---
    logging_enabled = app.config.get("WSK_LOGGING_ENABLED", DEFAULT_LOGGING_ENABLED)
    if logging_enabled is None:
        logging_enabled = DEFAULT_LOGGING_ENABLED
    if not isinstance(logging_enabled, bool):
        actual = type(logging_enabled).__name__
        raise ValueError(f"WSK_LOGGING_ENABLED must be a boolean. Got: {actual}")

    # --- logging_level ---
    logging_level = app.config.get("WSK_LOGGING_LEVEL", DEFAULT_LOGGING_LEVEL)
    if logging_level is None:
        logging_level = DEFAULT_LOGGING_LEVEL
    if not isinstance(logging_level, str):
        actual = type(logging_level).__name__
        raise ValueError(f"WSK_LOGGING_LEVEL must be a string. Got: {actual}")
    if logging_level.upper() not in VALID_LOGGING_LEVELS:
        choices = ", ".join(VALID_LOGGING_LEVELS)
        raise ValueError(f"WSK_LOGGING_LEVEL must be one of: {choices}." f" Got: '{logging_level}'")

    return FixtureSettings(
        namespace=namespace,
        auto_discover=auto_discover,
        action_packages=action_packages,
        manifest_dir=manifest_dir,
        default_timeout=default_timeout,
        activation_history=activation_history,
        api_enabled=api_enabled,
        api_url_prefix=api_url_prefix,
        logging_enabled=logging_enabled,
        logging_level=logging_level.upper(),
    )
