"""Hostify pass: anchor every selector on ``:host``.

Classification and rewrite are kept apart: :func:`scan_host` reads the
original node sequence once, :func:`rewrite_host` builds the new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from shadowstyle.model.selector import (
    HOST,
    ClassName,
    Combinator,
    Node,
    Pseudo,
    Selector,
    is_host_anchor,
)


class HostPresence(IntEnum):
    """How the host class shows up in a selector, weakest first."""

    NO = 0  # neither the host class nor a host modifier
    IS = 1  # only host modifiers ("<host>--quiet")
    YES = 2  # the host class itself


@dataclass(frozen=True)
class HostScan:
    """Result of :func:`scan_host`.

    Attributes:
        presence: Strongest host presence seen; never downgraded.
        boundary: Index of the first descendant combinator, or the
            selector length when there is none.
        host_at: Index of the last exact host node, -1 if none.
    """

    presence: HostPresence
    boundary: int
    host_at: int = -1


def scan_host(nodes: list[Node], host: str) -> HostScan:
    """Classify *nodes* against the *host* class name in a single pass."""
    boundary = -1
    presence = HostPresence.NO
    host_at = -1
    modifier_prefix = f"{host}--"
    for index, node in enumerate(nodes):
        if boundary == -1 and isinstance(node, Combinator) and node.is_descendant:
            boundary = index
        is_class = isinstance(node, ClassName)
        if is_host_anchor(node) or (is_class and node.value == host):
            presence = HostPresence.YES
            host_at = index
        elif is_class and node.value.startswith(modifier_prefix):
            presence = max(presence, HostPresence.IS)
    if boundary == -1:
        boundary = len(nodes)
    return HostScan(presence=presence, boundary=boundary, host_at=host_at)


def rewrite_host(nodes: list[Node], scan: HostScan) -> list[Node]:
    """Build the hostified node sequence for a classified selector."""
    nodes = [n.clone() for n in nodes]
    boundary = scan.boundary

    if scan.presence is HostPresence.NO:
        return [Pseudo(HOST), Combinator(" "), *nodes]

    if scan.presence is HostPresence.IS:
        return [_anchor(nodes[:boundary]), *nodes[boundary:]]

    if scan.host_at == 0 and boundary == 1:
        # The host class alone in the leading compound.
        first = nodes[0]
        host = first if is_host_anchor(first) else Pseudo(HOST)
        return [host, *nodes[1:]]

    if scan.host_at >= boundary:
        # Host class past the boundary: drop it with the node before it.
        host_node = nodes[scan.host_at]
        del nodes[scan.host_at - 1 : scan.host_at + 1]
        modifiers = nodes[:boundary]
    else:
        host_node = nodes[scan.host_at]
        modifiers = [n for i, n in enumerate(nodes[:boundary]) if i != scan.host_at]
    return [_anchor(_anchor_arguments(host_node) + modifiers), *nodes[boundary:]]


def _anchor(modifiers: list[Node]) -> Pseudo:
    if not modifiers:
        return Pseudo(HOST)
    return Pseudo(HOST, [Selector(modifiers)])


def _anchor_arguments(node: Node) -> list[Node]:
    """Nodes already carried by an existing ``:host(...)`` anchor."""
    if is_host_anchor(node) and node.first is not None:  # type: ignore[union-attr]
        return list(node.first.nodes)  # type: ignore[union-attr]
    return []


class HostifyPass:
    """Ensure a selector starts with a ``:host`` anchor.

    Host class handling:
        - absent: ``:host <selector>``
        - only modifiers: ``:host(<host region>) <rest>``
        - alone and leading: ``:host <rest>``
        - otherwise: ``:host(<modifiers>) <rest>``, host class removed

    The host region is everything before the first descendant combinator.
    """

    def __init__(self, host: str) -> None:
        self.host = host

    def apply(self, selector: Selector) -> Selector:
        scan = scan_host(selector.nodes, self.host)
        return Selector(rewrite_host(selector.nodes, scan), source=selector.source)
