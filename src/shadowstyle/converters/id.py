"""Id converter: turn element classes into ids of shadow-root elements."""

from __future__ import annotations

from shadowstyle.converters.base import matches
from shadowstyle.model.component import Component
from shadowstyle.model.selector import Id, Node


class IdConverter:
    """Convert a node listed in ``component.ids`` to an ``#id`` selector."""

    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> Node:
        for conversion in component.ids:
            if matches(node, conversion.selector):
                return Id(conversion.name or component.derive_name(conversion.selector))
        return node.clone()
