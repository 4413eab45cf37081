"""Base protocol for node converters and the shared selector matching rule."""

from __future__ import annotations

from typing import Protocol, Union

from shadowstyle.model.component import CONVERSION_TYPES, Component
from shadowstyle.model.selector import Node, Selector

ConverterResult = Union[Node, Selector]


class Converter(Protocol):
    """A node-to-node conversion step.

    ``following`` is the node's next sibling before conversion and
    ``source`` the selector being rewritten, for diagnostics.  A returned
    ``Selector`` is a fragment spliced into the parent in place of *node*.
    Converters must return a fresh node, never *node* itself.
    """

    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> ConverterResult: ...


def matches(node: Node, selector: str) -> bool:
    """Check whether *node* is the simple selector written as *selector*.

    ``.name`` matches a class node, ``:name``/``::name`` a pseudo node with
    that exact value; any other selector never matches.
    """
    kind = CONVERSION_TYPES.get(selector[:1])
    if kind is None or node.type != kind:
        return False
    if kind == "pseudo":
        return node.value == selector
    return node.value == selector[1:]
