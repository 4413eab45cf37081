"""Hoist-dir pass: collapse scattered ``[dir]`` predicates into one leading one."""

from __future__ import annotations

from shadowstyle.model.selector import (
    Attribute,
    Combinator,
    Node,
    Pseudo,
    Selector,
    Tag,
    is_host_anchor,
)

_DIR = ":dir"


def _dir_marker(attribute: Attribute) -> Pseudo:
    direction = attribute.value.replace('"', "").replace("'", "")
    if not direction:
        return Pseudo(_DIR)
    return Pseudo(_DIR, [Selector([Tag(direction)])])


def _marker_value(marker: Pseudo) -> str:
    first = marker.first
    if first is None or first.first is None:
        return ""
    return first.first.value


def _close_gaps(nodes: list[Node]) -> list[Node]:
    """Drop combinators left dangling by a removed compound."""
    closed: list[Node] = []
    for node in nodes:
        if isinstance(node, Combinator) and closed and isinstance(closed[-1], Combinator):
            closed[-1] = node
        else:
            closed.append(node)
    while closed and isinstance(closed[-1], Combinator):
        closed.pop()
    if closed and isinstance(closed[0], Combinator) and closed[0].is_descendant:
        closed.pop(0)
    return closed


def _prepend(selector: Selector, attribute: Attribute) -> None:
    """Place *attribute* at the front of *selector*.

    When the first node is ``:host`` or a pseudo with arguments, the
    predicate goes to the front of its first argument and the nested pass
    settles it from there.  Otherwise it is appended to the selector.
    """
    first = selector.first
    if isinstance(first, Pseudo) and (is_host_anchor(first) or first.nodes):
        if first.first is not None:
            first.first.nodes.insert(0, attribute)
        else:
            first.nodes.append(Selector([attribute]))
    else:
        selector.nodes.append(attribute)


def hoist_dir(selector: Selector) -> None:
    """Hoist direction predicates of *selector* in place, then of nested selectors."""
    for index, node in enumerate(selector.nodes):
        if isinstance(node, Attribute) and node.attribute.startswith("dir"):
            selector.nodes[index] = _dir_marker(node)

    found = False
    direction = ""
    remaining: list[Node] = []
    for node in selector.nodes:
        if isinstance(node, Pseudo) and node.value == _DIR:
            # Last marker wins.
            found = True
            direction = _marker_value(node)
        else:
            remaining.append(node)
    selector.nodes = _close_gaps(remaining) if found else remaining

    if found:
        if direction:
            _prepend(selector, Attribute("dir", direction, "=", '"'))
        else:
            _prepend(selector, Attribute("dir"))

    for node in selector.nodes:
        if isinstance(node, Pseudo):
            for argument in node.nodes:
                hoist_dir(argument)


class HoistDirPass:
    """Turn every ``[dir...]`` predicate into a single ``[dir="..."]`` on the host.

    ``:host .a[dir="rtl"] .b`` -> ``:host([dir="rtl"]) .a .b``
    """

    def apply(self, selector: Selector) -> Selector:
        hoist_dir(selector)
        return selector
