"""Flask Extension hosting serverless action fixtures locally.

Provides the WskFixtures class following Flask's Extension pattern.

init_app flow:
1. load_settings(app)
2. Create ActionRegistry
3. Call setup_observability(settings, ext_data)
4. Register CLI commands
5. Scan WSK_ACTION_PACKAGES for @action functions if auto-discover is on
6. Register the API Blueprint if WSK_API_ENABLED
7. Store everything in app.extensions["wsk_fixtures"]
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flask import Flask

    from wsk_fixtures.invoker import Invoker

from wsk_fixtures.config import load_settings
from wsk_fixtures.observability import setup_observability
from wsk_fixtures.registry import ActionRegistry, get_invoker, get_registry

logger = logging.getLogger("wsk_fixtures")


class WskFixtures:
    """Flask Extension serving registered actions through a local invoker.

    Usage (direct):
        app = Flask(__name__)
        wsk = WskFixtures(app)

    Usage (factory pattern):
        wsk = WskFixtures()

        def create_app():
            app = Flask(__name__)
            wsk.init_app(app)
            return app
    """

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Args:
            app: Flask application instance.

        Raises:
            ValueError: If any WSK_* config value is invalid.
        """
        settings = load_settings(app)
        registry = ActionRegistry()

        ext_data: dict[str, Any] = {
            "registry": registry,
            "invoker": None,  # Lazily created by get_invoker()
            "settings": settings,
        }
        setup_observability(settings, ext_data)

        app.extensions["wsk_fixtures"] = ext_data

        from wsk_fixtures.cli import wsk_cli

        app.cli.add_command(wsk_cli)

        logger.debug("wsk-fixtures initialized for app %s", app.name)

        if settings.auto_discover:
            self._scan_packages_for_actions(registry, settings.action_packages)
            logger.info("wsk-fixtures: auto-discovery complete: %d actions", registry.count)
        else:
            logger.debug("Auto-discovery disabled (WSK_AUTO_DISCOVER=False)")

        if settings.api_enabled:
            from wsk_fixtures.web import create_api_blueprint

            app.register_blueprint(create_api_blueprint(settings.api_url_prefix))
            logger.debug("Invocation API mounted at %s", settings.api_url_prefix)

    def _scan_packages_for_actions(self, registry: ActionRegistry, packages: list[str]) -> None:
        """Register @action-decorated functions found in the given packages.

        Missing packages are skipped with a debug message; a duplicate
        action name is logged and skipped.

        Args:
            registry: The ActionRegistry to register actions into.
            packages: List of dotted Python package paths to scan.
        """
        for package_name in packages:
            try:
                mod = importlib.import_module(package_name)
            except ImportError:
                logger.debug("Package %s not found; skipping action scan", package_name)
                continue

            for attr_name in dir(mod):
                obj = getattr(mod, attr_name)
                descriptor = getattr(obj, "wsk_action", None)
                if not callable(obj) or descriptor is None:
                    continue
                try:
                    registry.register(descriptor)
                    logger.debug("Registered @action function: %s.%s", package_name, attr_name)
                except ValueError:
                    logger.warning(
                        "Failed to register action from %s.%s",
                        package_name,
                        attr_name,
                        exc_info=True,
                    )

    def get_registry(self, app: Flask | None = None) -> ActionRegistry:
        return get_registry(app)

    def get_invoker(self, app: Flask | None = None) -> Invoker:
        return get_invoker(app)
