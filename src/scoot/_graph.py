"""
Introspection over a built resource graph.

These helpers walk the connections a build script has attached to
resources. They never modify the graph.

Example:
    Listing what a resource depends on::

        from scoot import compute, ievent, get_dependencies

        tick = ievent("Tick")
        store = compute("Store", "python3.12")
        worker = compute("Worker", "python3.12").on_event(tick).use(store, ["get"])

        get_dependencies(worker)  # {InternalEvent('Tick'), Compute('Store')}
"""

from typing import Any

from scoot._connections import Reference, Trigger

__all__ = [
    "get_connections",
    "get_dependencies",
]


def get_connections(resource: Any) -> list[Trigger | Reference]:
    """Return the connections owned by a resource.

    Args:
        resource: A resource built by a scoot factory. Objects without a
            `config` (such as events) own no connections.

    Returns:
        The resource's triggers followed by its references, each group in
        the order it was added.
    """
    config = getattr(resource, "config", None)
    if config is None:
        return []
    return [*config.triggers, *config.references]


def _direct_dependencies(resource: Any) -> list[Any]:
    deps: list[Any] = []
    for connection in get_connections(resource):
        if isinstance(connection, Trigger):
            deps.append(connection.source)
        else:
            deps.append(connection.target)
    return deps


def get_dependencies(resource: Any, transitive: bool = False) -> set[Any]:
    """Compute the objects a resource depends on.

    A resource depends on the source of each of its triggers and the
    target of each of its references.

    Args:
        resource: The resource to analyze.
        transitive: If True, include dependencies of dependencies.

    Returns:
        A set of resources and events. With `transitive=True` the set may
        contain `resource` itself when the graph has a cycle through it.
    """
    deps = set(_direct_dependencies(resource))

    if not transitive:
        return deps

    visited: set[Any] = set()
    to_visit = list(deps)

    while to_visit:
        current = to_visit.pop()
        if current in visited:
            continue
        visited.add(current)
        to_visit.extend(d for d in _direct_dependencies(current) if d not in visited)

    return visited
