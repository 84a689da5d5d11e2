"""Error types raised by actions and by the local invoker.

Action failures are plain data on the wire: ``ActionError.to_dict()``
produces the ``{"error": <message>}`` record the platform reports as the
activation result.
"""

from __future__ import annotations

from typing import Any

from wsk_fixtures.records import ErrorRecord


class ActionError(Exception):
    """Failure raised from inside an action.

    Carries the message that becomes the ``error`` field of the result.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return ErrorRecord(error=self.message).model_dump()


class MissingParameterError(ActionError):
    """A required input parameter was absent or not set."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"{parameter} parameter not set.")
        self.parameter = parameter


class ActionNotFoundError(LookupError):
    """No action with the given name is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Action '{name}' not found")
        self.name = name
