"""Internal events usable as trigger sources."""

import logging
from typing import Any

from scoot._errors import ImmutableFieldError, MissingArgument
from scoot._types import Metadata, ResourceType
from scoot._utils import Sealed, freeze, new_instance_id, validate_id

__all__ = [
    "InternalEvent",
    "ievent",
    "create_event",
]

logger = logging.getLogger(__name__)


class InternalEvent(Sealed):
    """A named event raised inside the deployed system.

    Both `metadata` and `name` are sealed, and no other attribute can be
    set. An event has no further configuration and is only meaningful as
    the source of a `Trigger`.

    Attributes:
        metadata: Identity record with type `ResourceType.INTERNAL_EVENT`.
        name: The validated event label.
    """

    metadata: Metadata
    name: str

    _fields = frozenset({"metadata", "name"})

    def __init__(self, name: str) -> None:
        if not name:
            raise MissingArgument("Failed to create internal event: missing name")
        validate_id(name)
        self.metadata = Metadata(
            instance_id=new_instance_id(), type=ResourceType.INTERNAL_EVENT
        )
        self.name = name
        freeze(self, "metadata", "name")
        logger.debug("Created internal event %r", name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._fields:
            raise ImmutableFieldError(name, self)
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"InternalEvent({self.name!r})"


def ievent(name: str) -> InternalEvent:
    """Create an `InternalEvent`.

    Raises:
        MissingArgument: If `name` is empty.
        InvalidIdentifier: If `name` fails the identifier grammar.
    """
    return InternalEvent(name)


create_event = ievent
