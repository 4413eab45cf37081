"""Pseudo converter: replace polyfill classes with native pseudo-classes."""

from __future__ import annotations

from shadowstyle.converters.base import matches
from shadowstyle.model.component import Component, PseudoConversion
from shadowstyle.model.selector import Node, Pseudo

FOCUS_RING = PseudoConversion(selector=".focus-ring", value=":focus-visible")


class PseudoConverter:
    """Apply a fixed set of pseudo conversions, independent of the component."""

    def __init__(self, conversions: tuple[PseudoConversion, ...] = (FOCUS_RING,)) -> None:
        self.conversions = conversions

    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> Node:
        for conversion in self.conversions:
            if matches(node, conversion.selector):
                return Pseudo(conversion.value)
        return node.clone()
