"""Example value builder: turns schema nodes into JSON-serializable examples.

Resolution order for every node, first match wins:

1. an explicit ``example`` is used verbatim;
2. a string node with an ``enum`` uses the first declared value;
3. an object node recurses into its properties;
4. an array node produces a one-element list of its item example;
5. anything else gets a placeholder from ``synthesize``.

Nodes already on the active recursion path are rendered as ``{}``, which
keeps self-referencing schemas finite.
"""

import logging
from typing import Any

from postmanify.generator.defaults import synthesize
from postmanify.parser.base import SchemaNode

logger = logging.getLogger(__name__)


def build_value(node: SchemaNode | None, _active: frozenset[int] = frozenset()) -> Any:
    """Build an example value for a single schema node."""
    if node is None:
        return ""
    if id(node) in _active:
        logger.debug("Schema %s revisited on the active path, using {}", node.ref or "<inline>")
        return {}
    active = _active | {id(node)}

    if node.example is not None:
        return node.example

    if node.has_type("string") and node.enum:
        return node.enum[0]

    if node.has_type("object"):
        return build_object_body(node.properties, active)

    if node.has_type("array"):
        return build_array(node.items, active)

    return synthesize(node.type, node.format)


def build_object_body(properties: dict[str, SchemaNode] | None, _active: frozenset[int] = frozenset()) -> dict:
    """Build an example object, keys in ascending order."""
    return {key: build_value(properties[key], _active) for key in sorted(properties or {})}


def build_array(items: SchemaNode | None, _active: frozenset[int] = frozenset()) -> list:
    """Build a one-element example list for an array item schema."""
    return [_build_item(items, _active)]


def _build_item(items: SchemaNode | None, active: frozenset[int]) -> Any:
    if items is None:
        return synthesize(None)
    if id(items) in active:
        return {}
    if items.has_type("object"):
        return build_object_body(items.properties, active | {id(items)})
    return synthesize(items.type, items.format)
