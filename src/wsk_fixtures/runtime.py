"""Bridges between actions and the platform's calling conventions.

Actions are coroutine functions that resolve to a result dict or raise
ActionError. The Python runtime instead calls a synchronous
``main(params)`` and treats a returned ``{"error": ...}`` dict as failure.
"""

from __future__ import annotations

import asyncio
import functools
import math
from typing import Any, Callable

from wsk_fixtures.descriptor import ActionFunc
from wsk_fixtures.errors import ActionError, MissingParameterError


def is_set(value: Any) -> bool:
    """Return True unless *value* is falsy under the platform's rules.

    None, False, empty strings, numeric zero and NaN are "not set".
    Empty lists and dicts count as set.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def require(params: dict[str, Any], key: str) -> Any:
    """Return ``params[key]`` or raise MissingParameterError if not set."""
    value = params.get(key)
    if not is_set(value):
        raise MissingParameterError(key)
    return value


def as_main(func: ActionFunc) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Adapt an action to the synchronous ``main(params) -> dict`` entry point.

    ActionError becomes its error record; anything else propagates.
    """

    # updated=() keeps the wsk_action descriptor off the wrapper.
    @functools.wraps(func, updated=())
    def main(params: dict[str, Any]) -> dict[str, Any]:
        try:
            return asyncio.run(func(params))
        except ActionError as e:
            return e.to_dict()

    return main
