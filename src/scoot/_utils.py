"""
Identity helpers shared by every resource factory.

- `validate_id` / `is_valid_id`: the identifier grammar for user labels
- `new_instance_id`: internal identifiers for `Metadata.instance_id`
- `Sealed` / `freeze`: per-attribute write protection
"""

import re
import uuid
from typing import Any

from scoot._config import settings
from scoot._errors import ImmutableFieldError, InvalidIdentifier

__all__ = [
    "Sealed",
    "freeze",
    "is_valid_id",
    "new_instance_id",
    "validate_id",
]


def is_valid_id(label: Any) -> bool:
    """Return True if `label` is a string matching `settings.id_pattern`."""
    if not isinstance(label, str):
        return False
    return re.fullmatch(settings.id_pattern, label) is not None


def validate_id(label: Any) -> None:
    """Check a user label against the identifier grammar.

    Args:
        label: The label to check.

    Raises:
        InvalidIdentifier: If the label is not a string or does not match.

    Example:
        >>> validate_id("MyFunction")
        >>> validate_id("my-bad id-for my event")
        Traceback (most recent call last):
        ...
        scoot._errors.InvalidIdentifier: Invalid identifier: 'my-bad id-for my event'
    """
    if not is_valid_id(label):
        raise InvalidIdentifier(label)


def new_instance_id() -> str:
    """Return a fresh random UUID4 string."""
    return str(uuid.uuid4())


class Sealed:
    """Mixin that rejects writes to attributes named by `freeze`.

    Attributes that were never frozen behave normally, so a class can keep
    its identity fields locked while the rest of its state stays mutable.
    """

    _sealed: frozenset[str] = frozenset()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_sealed" or name in self._sealed:
            raise ImmutableFieldError(name, self)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name == "_sealed" or name in self._sealed:
            raise ImmutableFieldError(name, self)
        super().__delattr__(name)


def freeze(obj: Sealed, *names: str) -> None:
    """Seal attributes of `obj` against reassignment and deletion.

    Freezing is additive: names sealed by earlier calls stay sealed.

    Args:
        obj: A `Sealed` instance.
        *names: Attribute names to seal. Each must already be set.

    Raises:
        TypeError: If `obj` is not a `Sealed` instance.
        AttributeError: If one of the names is not set on `obj`.
    """
    if not isinstance(obj, Sealed):
        raise TypeError(f"freeze() requires a Sealed instance, got {type(obj).__name__}")
    for name in names:
        if not hasattr(obj, name):
            raise AttributeError(f"{type(obj).__name__} has no attribute {name!r}")
    object.__setattr__(obj, "_sealed", obj._sealed | frozenset(names))
