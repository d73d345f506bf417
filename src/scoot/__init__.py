"""
scoot: Declarative builder for infrastructure resource graphs.

A build script declares resources, the events that trigger them, and the
references between them. The result is an in-memory graph that a
deployment or serialization layer consumes. scoot itself provisions
nothing.

Overview:
    Every resource has a sealed identity and a mutable configuration:

    - `metadata`: kind tag (`ResourceType`) and a generated instance id
    - `config`: the user label (`config.id`, sealed) plus settings that
      chainable methods fill in

    Resources are wired together with two kinds of connections:

    - `Trigger`: an event causes a resource to run
    - `Reference`: a resource may perform actions against another resource

Quick Start:
    Building a small graph::

        from scoot import compute, ievent

        uploaded = ievent("ImageUploaded")
        thumbnails = compute("Thumbnails", "python3.12")

        resize = (
            compute("Resize", "python3.12")
            .set_description("Resizes uploaded images")
            .set_source_control("https://github.com/acme/resize.git")
            .set_env("MAX_WIDTH", "1024")
            .on_event(uploaded)
            .use(thumbnails, ["write"])
        )

        resize.config.triggers[0].source is uploaded        # True
        resize.config.references[0].name                    # 'ThumbnailsRef'

    Identity is locked after construction::

        resize.config.id = "Other"  # raises ImmutableFieldError

Configuration:
    `Settings` reads ``SCOOT_ID_PATTERN`` and ``SCOOT_REFERENCE_SUFFIX``
    from the environment or a ``.env`` file.

Exports:
    Resources:
        - `Resource`, `ResourceConfig`: base classes for resource kinds
        - `Compute`, `ComputeConfig`, `compute`: the compute resource
        - `create_resource`, `register_resource`: build by kind
    Events:
        - `InternalEvent`, `ievent`, `create_event`
    Connections:
        - `Trigger`, `Reference`, `trigger`, `reference`
    Identity:
        - `ResourceType`, `Metadata`
        - `validate_id`, `is_valid_id`, `new_instance_id`
        - `Sealed`, `freeze`
    Introspection:
        - `get_connections`, `get_dependencies`
    Errors:
        - `ScootError`, `MissingArgument`, `InvalidIdentifier`,
          `UnknownResourceKind`, `InvalidParameter`, `ImmutableFieldError`
"""

from scoot._config import Settings, settings
from scoot._connections import Reference, Trigger, reference, trigger
from scoot._errors import (
    ImmutableFieldError,
    InvalidIdentifier,
    InvalidParameter,
    MissingArgument,
    ScootError,
    UnknownResourceKind,
)
from scoot._events import InternalEvent, create_event, ievent
from scoot._graph import get_connections, get_dependencies
from scoot._resources import (
    Compute,
    ComputeConfig,
    Resource,
    ResourceConfig,
    compute,
    create_resource,
    register_resource,
)
from scoot._types import Metadata, ResourceType
from scoot._utils import Sealed, freeze, is_valid_id, new_instance_id, validate_id

__all__ = [
    # Resources
    "Resource",
    "ResourceConfig",
    "Compute",
    "ComputeConfig",
    "compute",
    "create_resource",
    "register_resource",
    # Events
    "InternalEvent",
    "ievent",
    "create_event",
    # Connections
    "Trigger",
    "Reference",
    "trigger",
    "reference",
    # Identity
    "ResourceType",
    "Metadata",
    "validate_id",
    "is_valid_id",
    "new_instance_id",
    "Sealed",
    "freeze",
    # Introspection
    "get_connections",
    "get_dependencies",
    # Errors
    "ScootError",
    "MissingArgument",
    "InvalidIdentifier",
    "UnknownResourceKind",
    "InvalidParameter",
    "ImmutableFieldError",
    # Configuration
    "Settings",
    "settings",
]

__version__ = "0.1.0"
