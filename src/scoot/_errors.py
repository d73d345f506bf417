"""
Exception hierarchy for scoot.

Every error the library raises derives from `ScootError`, and also from
the closest built-in exception so callers can catch either:

- `MissingArgument`: a required construction argument is empty (`ValueError`)
- `InvalidIdentifier`: a label fails the identifier grammar (`ValueError`)
- `UnknownResourceKind`: no resource class is registered for a kind (`ValueError`)
- `InvalidParameter`: a construction parameter is not accepted (`TypeError`)
- `ImmutableFieldError`: a sealed attribute was written (`AttributeError`)

Errors are raised synchronously and never handled inside the library.
"""

from typing import Any

__all__ = [
    "ScootError",
    "MissingArgument",
    "InvalidIdentifier",
    "UnknownResourceKind",
    "InvalidParameter",
    "ImmutableFieldError",
]


class ScootError(Exception):
    """Base class for all scoot errors."""


class MissingArgument(ScootError, ValueError):
    """A required construction argument was empty or absent."""


class InvalidIdentifier(ScootError, ValueError):
    """A label does not match the identifier grammar.

    Attributes:
        label: The rejected label.
    """

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Invalid identifier: {label!r}")


class UnknownResourceKind(ScootError, ValueError):
    """No buildable resource class is registered for a kind.

    Attributes:
        kind: The requested kind.
    """

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"No resource registered for kind {kind!r}")


class InvalidParameter(ScootError, TypeError):
    """A construction parameter is unknown, reserved or given twice.

    Attributes:
        name: The offending parameter name.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Invalid parameter {name!r}: {reason}")


class ImmutableFieldError(ScootError, AttributeError):
    """A sealed attribute was reassigned or deleted.

    Attributes:
        field: The name of the sealed attribute.
    """

    def __init__(self, field: str, owner: object = None) -> None:
        self.field = field
        owner_name = type(owner).__name__ if owner is not None else "object"
        super().__init__(f"Cannot modify immutable field {field!r} of {owner_name}")
