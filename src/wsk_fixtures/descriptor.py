"""Action descriptors and the ``@action`` decorator.

An ActionDescriptor carries everything the platform needs to deploy and
invoke an action: the coroutine function itself, its exec kind and entry
point, resource limits, bound default parameters and annotations.

Usage:
    @action("create-cat", description="Create a cat.")
    async def create_cat(params):
        ...

The descriptor is attached to the function as ``wsk_action`` and picked up
by WskFixtures when the containing package is listed in
WSK_ACTION_PACKAGES.
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable

if TYPE_CHECKING:
    from pydantic import BaseModel

DEFAULT_VERSION = "0.0.1"
DEFAULT_KIND = "python:3"
DEFAULT_MAIN = "main"
DEFAULT_TIMEOUT = 60000
DEFAULT_MEMORY = 256

MIN_TIMEOUT, MAX_TIMEOUT = 100, 600000
MIN_MEMORY, MAX_MEMORY = 128, 2048

_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_@.\- ]*$")

ActionFunc = Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class ActionLimits:
    """Per-action resource limits.

    Attributes:
        timeout: Wall-clock limit in milliseconds.
        memory: Memory limit in megabytes.
    """

    timeout: int = DEFAULT_TIMEOUT
    memory: int = DEFAULT_MEMORY

    def __post_init__(self) -> None:
        if not isinstance(self.timeout, int) or isinstance(self.timeout, bool):
            raise ValueError(f"timeout must be an integer. Got: {type(self.timeout).__name__}")
        if not (MIN_TIMEOUT <= self.timeout <= MAX_TIMEOUT):
            raise ValueError(f"timeout must be between {MIN_TIMEOUT} and {MAX_TIMEOUT} ms. Got: {self.timeout}")
        if not isinstance(self.memory, int) or isinstance(self.memory, bool):
            raise ValueError(f"memory must be an integer. Got: {type(self.memory).__name__}")
        if not (MIN_MEMORY <= self.memory <= MAX_MEMORY):
            raise ValueError(f"memory must be between {MIN_MEMORY} and {MAX_MEMORY} MB. Got: {self.memory}")


@dataclass
class ActionDescriptor:
    """Deployment and invocation metadata for a single action.

    Attributes:
        name: Action name, unique within a namespace.
        func: The coroutine function implementing the action.
        description: One-line human readable description.
        version: Semantic version of the action.
        publish: Whether the action is shared outside its namespace.
        kind: Runtime kind (e.g. 'python:3').
        main: Name of the entry point inside the deployed code.
        limits: Resource limits.
        parameters: Bound default parameters, overridden by invocation params.
        annotations: Free-form platform annotations (e.g. 'web-export').
        input_model: Optional pydantic model describing the input.
        output_model: Optional pydantic model describing the success result.
    """

    name: str
    func: ActionFunc
    description: str = ""
    version: str = DEFAULT_VERSION
    publish: bool = False
    kind: str = DEFAULT_KIND
    main: str = DEFAULT_MAIN
    limits: ActionLimits = field(default_factory=ActionLimits)
    parameters: dict[str, Any] = field(default_factory=dict)
    annotations: dict[str, Any] = field(default_factory=dict)
    input_model: type[BaseModel] | None = None
    output_model: type[BaseModel] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_RE.match(self.name):
            raise ValueError(f"Invalid action name: {self.name!r}")
        if not inspect.iscoroutinefunction(self.func):
            raise TypeError(f"Action '{self.name}' must be an async function")

    @property
    def input_schema(self) -> dict[str, Any]:
        if self.input_model is None:
            return {"type": "object", "properties": {}}
        return self.input_model.model_json_schema()

    @property
    def output_schema(self) -> dict[str, Any]:
        if self.output_model is None:
            return {"type": "object", "properties": {}}
        return self.output_model.model_json_schema()


def action(
    name: str,
    *,
    description: str | None = None,
    version: str = DEFAULT_VERSION,
    publish: bool = False,
    kind: str = DEFAULT_KIND,
    main: str = DEFAULT_MAIN,
    limits: ActionLimits | None = None,
    parameters: dict[str, Any] | None = None,
    annotations: dict[str, Any] | None = None,
    input_model: type[BaseModel] | None = None,
    output_model: type[BaseModel] | None = None,
) -> Callable[[ActionFunc], ActionFunc]:
    """Mark a coroutine function as a platform action.

    The description defaults to the first line of the function docstring.
    The function itself is returned unchanged, so it stays directly
    awaitable.
    """

    def decorator(func: ActionFunc) -> ActionFunc:
        desc = description
        if desc is None:
            doc = inspect.getdoc(func) or ""
            desc = doc.splitlines()[0] if doc else ""
        func.wsk_action = ActionDescriptor(  # type: ignore[attr-defined]
            name=name,
            func=func,
            description=desc,
            version=version,
            publish=publish,
            kind=kind,
            main=main,
            limits=limits or ActionLimits(),
            parameters=dict(parameters or {}),
            annotations=dict(annotations or {}),
            input_model=input_model,
            output_model=output_model,
        )
        return func

    return decorator
