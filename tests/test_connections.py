"""Tests for the trigger and reference builders."""

import dataclasses

import pytest

from scoot import Reference, Trigger, compute, ievent, reference, trigger


class TestTrigger:
    """Tests for trigger().from_().to()."""

    def test_builds_trigger(self) -> None:
        """The chain should yield a Trigger."""
        event = ievent("Tick")
        job = compute("Job", "python3.12")
        edge = trigger().from_(event).to(job)
        assert isinstance(edge, Trigger)

    def test_live_references(self) -> None:
        """The edge should hold the objects themselves, not copies."""
        event = ievent("Tick")
        job = compute("Job", "python3.12")
        edge = trigger().from_(event).to(job)
        assert edge.source is event
        assert edge.target is job

    def test_sees_later_changes(self) -> None:
        """Configuration applied after wiring should be visible via the edge."""
        job = compute("Job", "python3.12")
        edge = trigger().from_(ievent("Tick")).to(job)
        job.set_description("late")
        assert edge.target.config.description == "late"

    def test_immutable(self) -> None:
        """Trigger fields should not be writable."""
        edge = trigger().from_(ievent("Tick")).to(compute("Job", "python3.12"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.source = None  # type: ignore[misc]

    def test_no_side_effects(self) -> None:
        """Building an edge should not attach it to either endpoint."""
        job = compute("Job", "python3.12")
        trigger().from_(ievent("Tick")).to(job)
        assert job.config.triggers == []


class TestReference:
    """Tests for reference(name).from_().to().allow()."""

    def test_builds_reference(self) -> None:
        """The chain should yield a Reference with every field set."""
        job = compute("Job", "python3.12")
        store = compute("Store", "python3.12")
        edge = reference("storeRef").from_(job).to(store).allow(["get", "put"])
        assert isinstance(edge, Reference)
        assert edge.name == "storeRef"
        assert edge.source is job
        assert edge.target is store
        assert edge.allow == ("get", "put")

    def test_allow_keeps_order(self) -> None:
        """Actions should keep the order they were given in."""
        edge = reference("r").from_(None).to(None).allow(["b", "a", "c"])
        assert edge.allow == ("b", "a", "c")

    def test_allow_single_string(self) -> None:
        """A single action string should not be split into characters."""
        edge = reference("r").from_(None).to(None).allow("read")
        assert edge.allow == ("read",)

    def test_allow_none(self) -> None:
        """No actions should give an empty allow-list."""
        edge = reference("r").from_(None).to(None).allow(None)
        assert edge.allow == ()

    def test_allow_copies_input(self) -> None:
        """Mutating the caller's list should not change the edge."""
        actions = ["read"]
        edge = reference("r").from_(None).to(None).allow(actions)
        actions.append("write")
        assert edge.allow == ("read",)

    def test_immutable(self) -> None:
        """Reference fields should not be writable."""
        edge = reference("r").from_(None).to(None).allow(["read"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.name = "other"  # type: ignore[misc]


class TestBuilderSteps:
    """Tests for the intermediate builder objects."""

    def test_steps_are_documented(self) -> None:
        """Every intermediate step should carry a docstring."""
        steps = [
            trigger(),
            trigger().from_(None),
            reference("r"),
            reference("r").from_(None),
            reference("r").from_(None).to(None),
        ]
        for step in steps:
            assert type(step).__doc__
