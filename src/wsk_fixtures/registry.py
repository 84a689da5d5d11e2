"""Action registry and app-scoped accessors.

State is stored per-app in app.extensions["wsk_fixtures"], so several
Flask apps (e.g. one per test) keep separate registries and histories.

get_invoker() lazily creates the Invoker on first use, wiring in the
activation store as a listener.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator

from flask import current_app

if TYPE_CHECKING:
    from flask import Flask

    from wsk_fixtures.descriptor import ActionDescriptor
    from wsk_fixtures.invoker import Invoker

logger = logging.getLogger("wsk_fixtures")


class ActionRegistry:
    """Name -> ActionDescriptor mapping for one namespace."""

    def __init__(self) -> None:
        self._actions: dict[str, ActionDescriptor] = {}

    def register(self, descriptor: ActionDescriptor) -> None:
        """Register an action.

        Raises:
            ValueError: If an action with the same name is already registered.
        """
        if descriptor.name in self._actions:
            raise ValueError(f"Action '{descriptor.name}' is already registered")
        self._actions[descriptor.name] = descriptor
        logger.debug("Registered action: %s", descriptor.name)

    def unregister(self, name: str) -> bool:
        return self._actions.pop(name, None) is not None

    def get(self, name: str) -> ActionDescriptor | None:
        return self._actions.get(name)

    @property
    def names(self) -> list[str]:
        return sorted(self._actions)

    @property
    def count(self) -> int:
        return len(self._actions)

    def iter(self) -> Iterator[tuple[str, ActionDescriptor]]:
        for name in self.names:
            yield name, self._actions[name]

    def __contains__(self, name: object) -> bool:
        return name in self._actions


def _ext_data(app: Flask | None) -> dict[str, Any]:
    if app is None:
        app = current_app._get_current_object()
    ext_data = app.extensions.get("wsk_fixtures")
    if ext_data is None:
        raise RuntimeError(
            "wsk-fixtures not initialized. " "Call WskFixtures(app) or wsk.init_app(app) first."
        )
    return ext_data


def get_registry(app: Flask | None = None) -> ActionRegistry:
    """Return the ActionRegistry for the current Flask app.

    Args:
        app: Flask app instance, or None to use current_app.

    Raises:
        RuntimeError: If wsk-fixtures not initialized or outside app context.
    """
    return _ext_data(app)["registry"]


def get_invoker(app: Flask | None = None) -> Invoker:
    """Return the Invoker for the current Flask app.

    Lazily created on first call. Finished activations are recorded in the
    app's ActivationStore, and WSK_DEFAULT_TIMEOUT overrides per-action
    timeouts when set.

    Args:
        app: Flask app instance, or None to use current_app.

    Raises:
        RuntimeError: If wsk-fixtures not initialized or outside app context.
    """
    ext_data = _ext_data(app)

    if ext_data["invoker"] is None:
        from wsk_fixtures.invoker import Invoker

        settings = ext_data["settings"]
        ext_data["invoker"] = Invoker(
            ext_data["registry"],
            namespace=settings.namespace,
            timeout_override=settings.default_timeout,
            listeners=[ext_data["activations"].record],
        )
        logger.debug("Created Invoker for namespace %s", settings.namespace)

    return ext_data["invoker"]
