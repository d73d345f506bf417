"""
Kind tags and identity records for resources.

`ResourceType` is the closed set of kinds the builder knows about. Consumers
switch on it to apply kind-specific behavior::

    if resource.metadata.type is ResourceType.COMPUTE:
        ...

`Metadata` pairs the kind tag with the internal instance identifier. It is
sealed as soon as it is constructed.
"""

import enum
from dataclasses import dataclass

from scoot._utils import Sealed, freeze

__all__ = [
    "ResourceType",
    "Metadata",
]


class ResourceType(str, enum.Enum):
    """Kind tag carried in every `Metadata` record."""

    COMPUTE = "Compute"
    INTERNAL_EVENT = "InternalEvent"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Metadata(Sealed):
    """Immutable identity block of a resource or event.

    Attributes:
        instance_id: Opaque identifier generated by `new_instance_id`. Never
            the user-facing label.
        type: The kind tag.
    """

    instance_id: str
    type: ResourceType

    def __post_init__(self) -> None:
        freeze(self, "instance_id", "type")
