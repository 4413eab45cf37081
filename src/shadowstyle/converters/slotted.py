"""Slot converter: target slotted light-DOM content instead of inner classes."""

from __future__ import annotations

import logging

from shadowstyle.converters.base import ConverterResult, matches
from shadowstyle.model.component import Component, SlotConversion
from shadowstyle.model.selector import Attribute, Combinator, Node, Pseudo, Selector, Tag
from shadowstyle.parser import parse_selector

logger = logging.getLogger(__name__)

_SIBLING_COMBINATORS = ("+", "~")


class SlotConverter:
    """Convert a node listed in ``component.slots``.

    * last node of the selector -> ``::slotted([slot="name"])``
    * followed by ``+`` or ``~`` -> ``slot[name="name"]``, so the rule
      reaches siblings of the slot element itself

    ``::slotted()`` is only valid as the last compound of a selector, so
    any other position logs a warning and leaves the node unconverted.
    """

    def convert(
        self,
        node: Node,
        following: Node | None,
        component: Component,
        source: str,
    ) -> ConverterResult:
        for conversion in component.slots:
            if not matches(node, conversion.selector):
                continue
            if following is None:
                return _slotted(conversion)
            if isinstance(following, Combinator) and following.value in _SIBLING_COMBINATORS:
                return _slot_element(conversion)
            logger.warning(
                "::slotted() rules must be the last in the selector: component=%s selector=%s",
                component.name,
                source,
            )
            return node.clone()
        return node.clone()


def _slotted(conversion: SlotConversion) -> Pseudo:
    nodes: list[Node] = []
    if conversion.content:
        nodes.extend(parse_selector(conversion.content).selectors[0].nodes)
    nodes.append(Attribute("slot", conversion.name, "=", '"'))
    return Pseudo("::slotted", [Selector(nodes)])


def _slot_element(conversion: SlotConversion) -> Selector:
    nodes: list[Node] = [Tag("slot")]
    if conversion.name:
        nodes.append(Attribute("name", conversion.name, "=", '"'))
    return Selector(nodes)
