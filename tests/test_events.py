"""Tests for internal events."""

import pytest

from scoot import (
    ImmutableFieldError,
    InternalEvent,
    InvalidIdentifier,
    MissingArgument,
    ResourceType,
    create_event,
    ievent,
)


class TestInternalEvent:
    """Tests for ievent()."""

    def test_create(self) -> None:
        """ievent() should create an InternalEvent."""
        event = ievent("MyInternalEvent")
        assert isinstance(event, InternalEvent)
        assert event.name == "MyInternalEvent"
        assert event.metadata.type is ResourceType.INTERNAL_EVENT

    def test_bad_id(self) -> None:
        """A name outside the grammar should raise InvalidIdentifier."""
        with pytest.raises(InvalidIdentifier):
            ievent("my-bad id-for my event")

    def test_missing_name(self) -> None:
        """An empty name should raise MissingArgument."""
        with pytest.raises(MissingArgument):
            ievent("")

    def test_create_event_alias(self) -> None:
        """create_event() should behave like ievent()."""
        event = create_event("Tick")
        assert event.metadata.type is ResourceType.INTERNAL_EVENT

    def test_metadata_sealed(self) -> None:
        """metadata should not be rebound or modified."""
        event = ievent("Tick")
        with pytest.raises(ImmutableFieldError):
            event.metadata = ievent("Other").metadata
        with pytest.raises(ImmutableFieldError):
            event.metadata.type = ResourceType.COMPUTE

    def test_name_sealed(self) -> None:
        """name should not be reassignable."""
        event = ievent("Tick")
        with pytest.raises(ImmutableFieldError):
            event.name = "Tock"
        assert event.name == "Tick"

    def test_repr(self) -> None:
        """repr() should show the event name."""
        assert repr(ievent("Tick")) == "InternalEvent('Tick')"

    def test_no_other_attributes(self) -> None:
        """Events should not accept configuration beyond their identity."""
        event = ievent("Tick")
        with pytest.raises(ImmutableFieldError) as exc_info:
            event.runtime = "python3.12"  # type: ignore[attr-defined]
        assert exc_info.value.field == "runtime"
        assert not hasattr(event, "runtime")
