"""
Directed connections between resources.

Two edge kinds link objects in a build graph:

- `Trigger`: an event causes a resource to execute
- `Reference`: a resource is allowed to act on another resource

Each edge is assembled through a small chain that reads in the direction
of the edge::

    from scoot import trigger, reference

    edge = trigger().from_(nightly).to(report_job)
    grant = reference("bucketRef").from_(report_job).to(bucket).allow(["read"])

The builders do not validate their inputs; resources and events are
expected to come from the scoot factories. Edges hold the connected
objects themselves, so configuration applied later is visible through
the edge.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Trigger",
    "Reference",
    "trigger",
    "reference",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Trigger:
    """An event that causes a resource to run.

    Attributes:
        source: The event that fires.
        target: The resource that executes.
    """

    source: Any
    target: Any


@dataclass(frozen=True, eq=False)
class Reference:
    """Permission for one resource to act on another.

    Attributes:
        name: Alias under which `source` addresses `target`.
        source: The resource granted access.
        target: The resource being accessed.
        allow: Permitted action names, in the order given.
    """

    name: str
    source: Any
    target: Any
    allow: tuple[str, ...] = ()


class _TriggerTo:
    """Second step of `trigger()`: holds the source, awaits the target."""

    __slots__ = ("_source",)

    def __init__(self, source: Any) -> None:
        self._source = source

    def to(self, target: Any) -> Trigger:
        edge = Trigger(source=self._source, target=target)
        logger.debug("Created trigger %r -> %r", self._source, target)
        return edge


class _TriggerFrom:
    """First step of `trigger()`: awaits the source event."""

    __slots__ = ()

    def from_(self, source: Any) -> _TriggerTo:
        return _TriggerTo(source)


def trigger() -> _TriggerFrom:
    """Start building a `Trigger`.

    Returns:
        A builder exposing ``from_(event).to(resource)``.
    """
    return _TriggerFrom()


class _ReferenceAllow:
    """Last step of `reference()`: holds both ends, awaits the actions."""

    __slots__ = ("_name", "_source", "_target")

    def __init__(self, name: str, source: Any, target: Any) -> None:
        self._name = name
        self._source = source
        self._target = target

    def allow(self, actions: Iterable[str] | str | None) -> Reference:
        if actions is None:
            allowed: tuple[str, ...] = ()
        elif isinstance(actions, str):
            allowed = (actions,)
        else:
            allowed = tuple(actions)
        edge = Reference(
            name=self._name, source=self._source, target=self._target, allow=allowed
        )
        logger.debug(
            "Created reference %r: %r -> %r allow=%r",
            self._name,
            self._source,
            self._target,
            edge.allow,
        )
        return edge


class _ReferenceTo:
    """Third step of `reference()`: holds name and source, awaits the target."""

    __slots__ = ("_name", "_source")

    def __init__(self, name: str, source: Any) -> None:
        self._name = name
        self._source = source

    def to(self, target: Any) -> _ReferenceAllow:
        return _ReferenceAllow(self._name, self._source, target)


class _ReferenceFrom:
    """Second step of `reference()`: holds the name, awaits the source."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def from_(self, source: Any) -> _ReferenceTo:
        return _ReferenceTo(self._name, source)


def reference(name: str) -> _ReferenceFrom:
    """Start building a `Reference` called `name`.

    Args:
        name: Alias under which the source addresses the target.

    Returns:
        A builder exposing ``from_(resource).to(target).allow(actions)``.
    """
    return _ReferenceFrom(name)
