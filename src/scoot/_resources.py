"""
Buildable resources.

A resource has two parts:

- `metadata`: a sealed `Metadata` record (kind tag + internal instance id)
- `config`: a mutable configuration record whose `id` is the user label

Only `config.id` is sealed inside the configuration. Everything else is
set through chainable methods that return the resource itself::

    from scoot import compute, ievent

    nightly = ievent("Nightly")
    bucket = compute("Archive", "python3.12")

    job = (
        compute("Report", "python3.12")
        .set_source_control("https://github.com/acme/report.git")
        .set_env("LOG_LEVEL", "info")
        .set_tag("team", "data")
        .on_event(nightly)
        .use(bucket, ["read", "write"])
    )

    assert job.config.references[0].name == "ArchiveRef"

New kinds subclass `Resource`, declare their `kind`, `config_class` and
`required_params`, and register with `register_resource` so that
`create_resource` can build them.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypeVar

from scoot._config import settings
from scoot._connections import Reference, Trigger, reference, trigger
from scoot._errors import InvalidParameter, MissingArgument, UnknownResourceKind
from scoot._types import Metadata, ResourceType
from scoot._utils import Sealed, freeze, new_instance_id, validate_id

__all__ = [
    "ResourceConfig",
    "ComputeConfig",
    "Resource",
    "Compute",
    "compute",
    "create_resource",
    "register_resource",
]

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Resource")
C = TypeVar("C", bound=type["Resource"])

_RESOURCE_TYPES: dict[ResourceType, type["Resource"]] = {}
_RESERVED_PARAMS = frozenset({"id", "triggers", "references"})


@dataclass(kw_only=True, eq=False)
class ResourceConfig(Sealed):
    """Configuration shared by every resource kind.

    Attributes:
        id: The user label. Sealed once the record is built.
        description: Human-readable description.
        environment: Environment variables passed to the resource.
        tags: Free-form key/value tags.
        triggers: Triggers whose target is this resource.
        references: References whose source is this resource.
    """

    id: str
    description: str | None = None
    environment: dict[str, str] = field(default_factory=dict)
    tags: dict[str, str] = field(default_factory=dict)
    triggers: list[Trigger] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)

    def __post_init__(self) -> None:
        freeze(self, "id")


@dataclass(kw_only=True, eq=False)
class ComputeConfig(ResourceConfig):
    """Configuration of a compute instance.

    Attributes:
        runtime: Provider-specific runtime the code executes in.
        vcs: URL of the source repository holding the code.
        code: Inline code. Consumers give it precedence over `vcs`.
    """

    runtime: str
    vcs: str | None = None
    code: str | None = None


class Resource(Sealed):
    """Base class for buildable resources.

    Subclasses set:

    - `kind`: the `ResourceType` written to `metadata.type`
    - `config_class`: the `ResourceConfig` subclass to instantiate
    - `required_params`: keyword arguments that must be non-empty

    Construction checks the label and required parameters before anything
    is allocated, so a failed call never yields a partial resource.

    Attributes:
        metadata: Sealed identity record.
        config: Configuration record. The attribute itself cannot be
            rebound; its fields other than `id` can be changed freely.

    Raises:
        MissingArgument: If the label or a required parameter is empty.
        InvalidIdentifier: If the label fails the identifier grammar.
        InvalidParameter: If a keyword is not a config field, or is `id`,
            `triggers` or `references`.
        UnknownResourceKind: If the class was never given a `kind`.
    """

    kind: ClassVar[ResourceType]
    config_class: ClassVar[type[ResourceConfig]] = ResourceConfig
    required_params: ClassVar[tuple[str, ...]] = ()

    metadata: Metadata
    config: ResourceConfig

    def __init__(self, id: str, **params: Any) -> None:
        kind = getattr(type(self), "kind", None)
        if kind is None:
            raise UnknownResourceKind(type(self).__name__)
        accepted = self.config_params()
        for name in params:
            if name not in accepted:
                raise InvalidParameter(
                    name, f"not a construction parameter of {type(self).__name__}"
                )
        if not id:
            raise MissingArgument(f"Failed to create {kind} object: missing id")
        for name in self.required_params:
            if not params.get(name):
                raise MissingArgument(
                    f"Failed to create {kind} object: missing {name}"
                )
        validate_id(id)

        self.metadata = Metadata(instance_id=new_instance_id(), type=kind)
        self.config = self.config_class(id=id, **params)
        freeze(self, "metadata", "config")
        logger.debug(
            "Created %s %r (instance %s)", self.kind, id, self.metadata.instance_id
        )

    @classmethod
    def config_params(cls) -> frozenset[str]:
        """Return the config fields that may be passed at construction.

        The label and the connection lists are excluded; they are set by
        the constructor and by `on_event` / `use` respectively.
        """
        names = frozenset(f.name for f in fields(cls.config_class))
        return names - _RESERVED_PARAMS

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config.id!r})"

    def set_description(self: R, text: str) -> R:
        """Set a short description of the resource."""
        self.config.description = text
        return self

    def set_env(self: R, name: str, value: str) -> R:
        """Add or overwrite one environment variable."""
        self.config.environment[name] = value
        return self

    def set_tag(self: R, key: str, value: str) -> R:
        """Add or overwrite one tag."""
        self.config.tags[key] = value
        return self

    def on_event(self: R, event: Any) -> R:
        """Run this resource whenever `event` fires.

        Appends ``trigger().from_(event).to(self)`` to `config.triggers`.
        """
        self.config.triggers.append(trigger().from_(event).to(self))
        return self

    def use(
        self: R,
        resource: "Resource",
        actions: Iterable[str] | str | None = None,
        alias: str | None = None,
    ) -> R:
        """Grant this resource access to another resource.

        Args:
            resource: The resource being accessed.
            actions: Action names this resource may perform on `resource`.
            alias: Name of the reference. Defaults to the target's label
                followed by `settings.reference_suffix` (``"Ref"``).

        Returns:
            This resource.
        """
        name = alias if alias else resource.config.id + settings.reference_suffix
        self.config.references.append(
            reference(name).from_(self).to(resource).allow(actions)
        )
        return self


def register_resource(kind: ResourceType) -> Callable[[C], C]:
    """Class decorator registering a `Resource` subclass for `kind`."""

    def decorator(cls: C) -> C:
        cls.kind = kind
        _RESOURCE_TYPES[kind] = cls
        return cls

    return decorator


@register_resource(ResourceType.COMPUTE)
class Compute(Resource):
    """A unit of code execution.

    Example:
        >>> fn = compute("Resize", "nodejs20.x").set_code("exports.handler = ...")
        >>> fn.metadata.type
        <ResourceType.COMPUTE: 'Compute'>
    """

    config_class = ComputeConfig
    required_params = ("runtime",)

    config: ComputeConfig

    def set_source_control(self, url: str) -> "Compute":
        """Set the URL of the repository holding the code to run."""
        self.config.vcs = url
        return self

    def set_code(self, content: str) -> "Compute":
        """Set inline code. Does not clear `config.vcs`."""
        self.config.code = content
        return self


def compute(id: str, runtime: str) -> Compute:
    """Create a `Compute` resource.

    Args:
        id: User label for the instance.
        runtime: Provider-specific runtime of the code.

    Returns:
        The new compute resource.

    Raises:
        MissingArgument: If `id` or `runtime` is empty.
        InvalidIdentifier: If `id` fails the identifier grammar.
    """
    return Compute(id, runtime=runtime)


def create_resource(
    kind: ResourceType | str, label: str, *args: Any, **params: Any
) -> Resource:
    """Create a resource of any registered kind.

    Required parameters may be given positionally, in the order of the
    kind's `required_params`, or by keyword::

        create_resource(ResourceType.COMPUTE, "Resize", "python3.12")
        create_resource("Compute", "Resize", runtime="python3.12")

    Args:
        kind: A `ResourceType` or its string value (``"Compute"``).
        label: User label for the resource.
        *args: Required parameters of the kind, in declaration order.
        **params: Kind-specific configuration, e.g. ``runtime`` for compute.

    Returns:
        The new resource.

    Raises:
        UnknownResourceKind: If no resource class is registered for `kind`.
        InvalidParameter: If there are more positional parameters than the
            kind requires, a parameter is given twice, or a keyword is not
            accepted by the kind.
        MissingArgument: If the label or a required parameter is empty.
        InvalidIdentifier: If the label fails the identifier grammar.
    """
    try:
        resource_type = ResourceType(kind)
    except ValueError:
        raise UnknownResourceKind(kind) from None
    cls = _RESOURCE_TYPES.get(resource_type)
    if cls is None:
        raise UnknownResourceKind(kind)

    # `id` would collide with the label argument of the constructor
    accepted = cls.config_params()
    for name in params:
        if name not in accepted:
            raise InvalidParameter(name, f"not a construction parameter of {resource_type}")
    required = cls.required_params
    if len(args) > len(required):
        raise InvalidParameter(
            f"#{len(required) + 1}",
            f"{resource_type} takes {len(required)} positional parameter(s)",
        )
    for name, value in zip(required, args):
        if name in params:
            raise InvalidParameter(name, "given both positionally and by keyword")
        params[name] = value
    return cls(label, **params)
