"""Whereify pass: zero the specificity of host modifiers."""

from __future__ import annotations

from shadowstyle.model.selector import HOST, Node, Pseudo, Selector, is_host_anchor


class WhereifyHostPass:
    """Wrap each ``:host(...)`` argument in ``:where()``.

    ``:host([quiet]) .input`` -> ``:host(:where([quiet])) .input``

    Pseudo-elements cannot live inside ``:host()``; they are moved out to
    follow the anchor, and an argument left empty is dropped.
    """

    def apply(self, selector: Selector) -> Selector:
        first = selector.first
        if not is_host_anchor(first):
            return selector

        wrapped: list[Node] = []
        pseudo_element: Pseudo | None = None
        for argument in first.nodes:  # type: ignore[union-attr]
            kept: list[Node] = []
            for node in argument.nodes:
                if isinstance(node, Pseudo) and node.is_element:
                    pseudo_element = node.clone()
                else:
                    kept.append(node)
            if not kept:
                continue
            wrapped.append(Pseudo(":where", [Selector(kept)]))

        host = Pseudo(HOST, [Selector(wrapped)] if wrapped else [])
        nodes: list[Node] = [host]
        if pseudo_element is not None:
            nodes.append(pseudo_element)
        nodes.extend(selector.nodes[1:])
        return Selector(nodes, source=selector.source)
