"""Class converter: rename source classes to the element's internal classes."""

from __future__ import annotations

from shadowstyle.converters.base import matches
from shadowstyle.model.component import Component
from shadowstyle.model.selector import ClassName, Node


class ClassConverter:
    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> Node:
        for conversion in component.classes:
            if matches(node, conversion.selector):
                return ClassName(conversion.name)
        return node.clone()
