"""Attribute converter: turn modifier classes into host attributes."""

from __future__ import annotations

from shadowstyle.converters.base import matches
from shadowstyle.model.component import Component, EnumConversion
from shadowstyle.model.selector import Attribute, Node


class AttributeConverter:
    """Convert a node listed in ``component.attributes`` to an attribute.

    Selector conversions produce a boolean ``[name]``; enum conversions
    produce ``[name="value"]`` using the first listed value whose
    selector matches.  Conversions are tried in descriptor order and the
    first match wins.
    """

    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> Node:
        for conversion in component.attributes:
            if isinstance(conversion, EnumConversion):
                for option in conversion.values:
                    if matches(node, option.selector):
                        value = option.name or component.derive_name(option.selector)
                        return Attribute(conversion.name, value, "=", '"')
            elif matches(node, conversion.selector):
                return Attribute(conversion.name or component.derive_name(conversion.selector))
        return node.clone()
