"""Observability setup for wsk-fixtures.

Reads FixtureSettings and prepares the activation history and, when
enabled, a log handler on the "wsk_fixtures" logger. Called during
WskFixtures.init_app().
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wsk_fixtures.config import FixtureSettings
    from wsk_fixtures.invoker import Activation

logger = logging.getLogger("wsk_fixtures")

_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Handler attached by the last setup_observability() call, shared by every app.
_handler: logging.Handler | None = None


class ActivationStore:
    """Bounded in-memory history of finished activations.

    Used as an Invoker listener. With ``maxlen=0`` nothing is kept.
    """

    def __init__(self, maxlen: int = 100) -> None:
        self._items: deque[Activation] = deque(maxlen=maxlen)

    def record(self, activation: Activation) -> None:
        self._items.append(activation)

    def get(self, activation_id: str) -> Activation | None:
        for activation in self._items:
            if activation.activation_id == activation_id:
                return activation
        return None

    def list(self, limit: int | None = None, name: str | None = None) -> list[Activation]:
        """Return activations newest first, optionally filtered by action name.

        Raises:
            ValueError: If *limit* is given and is less than 1.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer. Got: {limit}")
        items = [a for a in reversed(self._items) if name is None or a.action_name == name]
        if limit is not None:
            items = items[:limit]
        return items

    def __len__(self) -> int:
        return len(self._items)


def setup_observability(settings: FixtureSettings, ext_data: dict[str, Any]) -> None:
    """Configure activation history and logging from settings.

    Results are stored in *ext_data*:
    - ``ext_data["activations"]``: ActivationStore instance
    - ``ext_data["log_handler"]``: attached logging.Handler (or None)

    The "wsk_fixtures" logger is process-wide, so a handler attached by an
    earlier call is replaced rather than stacked.

    Args:
        settings: Validated FixtureSettings from load_settings().
        ext_data: Mutable dict that will be stored in app.extensions["wsk_fixtures"].
    """
    global _handler

    ext_data["activations"] = ActivationStore(maxlen=settings.activation_history)

    handler = None
    if settings.logging_enabled:
        if _handler is not None:
            logger.removeHandler(_handler)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(settings.logging_level)
        _handler = handler
        logger.debug("Observability: logging enabled (level=%s)", settings.logging_level)

    ext_data["log_handler"] = handler
