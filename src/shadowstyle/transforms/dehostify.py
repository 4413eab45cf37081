"""Dehostify pass: drop an unmodified leading ``:host`` from descendant rules."""

from __future__ import annotations

from shadowstyle.model.selector import Combinator, Selector, is_host_anchor


class DehostifyPass:
    """``:host .a .b`` -> ``.a .b`` when the anchor carries no arguments.

    Must run last: whereify may still give the anchor arguments.
    """

    def apply(self, selector: Selector) -> Selector:
        nodes = selector.nodes
        if (
            len(nodes) > 1
            and is_host_anchor(nodes[0])
            and not nodes[0].nodes  # type: ignore[union-attr]
            and isinstance(nodes[1], Combinator)
            and nodes[1].is_descendant
        ):
            return Selector(nodes[2:], source=selector.source)
        return selector
