"""wsk-fixtures: serverless action test fixtures with a local Flask host."""

__version__ = "0.1.0"

from wsk_fixtures.extension import WskFixtures

from wsk_fixtures.descriptor import ActionDescriptor, ActionLimits, action
from wsk_fixtures.errors import ActionError, ActionNotFoundError, MissingParameterError
from wsk_fixtures.invoker import Activation, Invoker
from wsk_fixtures.registry import ActionRegistry
from wsk_fixtures.runtime import as_main

__all__ = [
    "WskFixtures",
    "__version__",
    "action",
    "as_main",
    "ActionDescriptor",
    "ActionError",
    "ActionLimits",
    "ActionNotFoundError",
    "ActionRegistry",
    "Activation",
    "Invoker",
    "MissingParameterError",
]
