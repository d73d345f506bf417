#!/usr/bin/env python3
"""Demo: Building a Resource Graph with scoot

Declares a small image pipeline, then walks the graph the way a
deployment layer would.

Run with: python examples/demo.py
"""

import logging

from scoot import (
    Reference,
    ResourceType,
    Trigger,
    compute,
    get_connections,
    get_dependencies,
    ievent,
)

logger = logging.getLogger("demo")

# must run before the declarations below
logging.basicConfig(level=logging.DEBUG)


# =============================================================================
# PART 1: Declare resources
# =============================================================================

uploaded = ievent("ImageUploaded")
nightly = ievent("Nightly")

originals = compute("Originals", "python3.12").set_description("Raw uploads")
thumbnails = compute("Thumbnails", "python3.12").set_description("Resized images")

resize = (
    compute("Resize", "python3.12")
    .set_description("Resizes uploaded images")
    .set_source_control("https://github.com/acme/resize.git")
    .set_env("MAX_WIDTH", "1024")
    .set_tag("team", "media")
    .on_event(uploaded)
    .use(originals, ["read"])
    .use(thumbnails, ["write"], "output")
)

cleanup = (
    compute("Cleanup", "python3.12")
    .set_code("def handler(event, context):\n    pass\n")
    .on_event(nightly)
    .use(thumbnails, ["list", "delete"])
)


# =============================================================================
# PART 2: Walk the graph
# =============================================================================


def describe(resource: object) -> None:
    """Print the connections of one resource."""
    for connection in get_connections(resource):
        if isinstance(connection, Trigger):
            print(f"  on {connection.source.name}")
        elif isinstance(connection, Reference):
            actions = ", ".join(connection.allow)
            print(f"  {connection.name} -> {connection.target.config.id} [{actions}]")


def main() -> None:
    for resource in (resize, cleanup):
        kind = resource.metadata.type
        if kind is ResourceType.COMPUTE:
            print(f"{resource.config.id} ({resource.config.runtime})")
        describe(resource)
        deps = sorted(
            getattr(d, "name", None) or d.config.id for d in get_dependencies(resource)
        )
        logger.info("%s depends on %s", resource.config.id, deps)


if __name__ == "__main__":
    main()
