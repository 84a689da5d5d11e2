"""Local invoker: runs registered actions the way the platform would.

Each invocation produces an Activation record. Action failures never
escape as exceptions; they become the activation's status and result,
mirroring how the platform reports a rejected action.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable

from wsk_fixtures.errors import ActionError, ActionNotFoundError

if TYPE_CHECKING:
    from wsk_fixtures.registry import ActionRegistry

logger = logging.getLogger("wsk_fixtures")

STATUS_SUCCESS = "success"
STATUS_APPLICATION_ERROR = "application error"
STATUS_DEVELOPER_ERROR = "action developer error"


@dataclass
class Activation:
    """Outcome of one action invocation.

    Attributes:
        activation_id: 32-character hex identifier.
        action_name: Name of the invoked action.
        namespace: Namespace the action was invoked in.
        status: One of STATUS_SUCCESS, STATUS_APPLICATION_ERROR,
            STATUS_DEVELOPER_ERROR.
        result: Success record, or an ``{"error": ...}`` record.
        start: Start time in epoch milliseconds.
        end: End time in epoch milliseconds.
        params: Effective parameters after merging bound defaults.
    """

    activation_id: str
    action_name: str
    namespace: str
    status: str
    result: dict[str, Any]
    start: int
    end: int
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def duration(self) -> int:
        return self.end - self.start


ActivationListener = Callable[[Activation], None]


def _now_ms() -> int:
    return int(time.time() * 1000)


class Invoker:
    """Invokes actions from an ActionRegistry.

    Args:
        registry: Source of action descriptors.
        namespace: Namespace recorded on every activation.
        timeout_override: If set, replaces every action's own timeout (ms).
        listeners: Callables notified with each finished Activation.
    """

    def __init__(
        self,
        registry: ActionRegistry,
        *,
        namespace: str = "guest",
        timeout_override: int | None = None,
        listeners: Iterable[ActivationListener] = (),
    ) -> None:
        self.registry = registry
        self.namespace = namespace
        self.timeout_override = timeout_override
        self.listeners = list(listeners)

    async def invoke_async(self, name: str, params: dict[str, Any] | None = None) -> Activation:
        """Invoke the named action and wait for it to settle.

        Bound default parameters are applied first; invocation params
        override them.

        Raises:
            ActionNotFoundError: If no action named *name* is registered.
        """
        descriptor = self.registry.get(name)
        if descriptor is None:
            raise ActionNotFoundError(name)

        effective = {**descriptor.parameters, **(params or {})}
        timeout = self.timeout_override or descriptor.limits.timeout

        start = _now_ms()
        try:
            result = await asyncio.wait_for(descriptor.func(effective), timeout=timeout / 1000)
            status = STATUS_SUCCESS
            if not isinstance(result, dict):
                result = {"error": "The action did not return a dictionary."}
                status = STATUS_DEVELOPER_ERROR
        except ActionError as e:
            result = e.to_dict()
            status = STATUS_APPLICATION_ERROR
        except asyncio.TimeoutError:
            result = {"error": f"The action exceeded its time limits of {timeout} milliseconds."}
            status = STATUS_DEVELOPER_ERROR
        except Exception as e:
            logger.warning("Action %s raised an unexpected error", name, exc_info=True)
            result = {"error": f"An error has occurred: {e}"}
            status = STATUS_DEVELOPER_ERROR
        end = _now_ms()

        activation = Activation(
            activation_id=uuid.uuid4().hex,
            action_name=name,
            namespace=self.namespace,
            status=status,
            result=result,
            start=start,
            end=end,
            params=effective,
        )

        if activation.success:
            logger.info("Activation %s: %s succeeded in %dms", activation.activation_id, name, activation.duration)
        else:
            # Only developer errors log at WARNING.
            level = logging.INFO if status == STATUS_APPLICATION_ERROR else logging.WARNING
            logger.log(
                level,
                "Activation %s: %s failed (%s): %s",
                activation.activation_id,
                name,
                status,
                result.get("error"),
            )

        for listener in self.listeners:
            listener(activation)

        return activation

    def invoke(self, name: str, params: dict[str, Any] | None = None) -> Activation:
        """Synchronous wrapper around invoke_async().

        Must not be called from inside a running event loop.
        """
        return asyncio.run(self.invoke_async(name, params))
