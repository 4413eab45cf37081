"""Convert pass: run one converter over every node of a selector tree."""

from __future__ import annotations

from shadowstyle.converters.base import Converter
from shadowstyle.model.component import Component
from shadowstyle.model.selector import Node, Pseudo, Selector

_SLOTTED = "::slotted"


class ConvertPass:
    """Apply *converter* depth-first to every node, nested arguments included.

    A converter may change a node's type.  When the replacement is a
    pseudo, the original node's arguments are converted and hung off it,
    except for ``::slotted()`` whose arguments the converter built itself.
    """

    def __init__(self, component: Component, converter: Converter) -> None:
        self.component = component
        self.converter = converter

    def apply(self, selector: Selector) -> Selector:
        source = selector.source or str(selector)
        return Selector(self._convert_nodes(selector.nodes, source), source=selector.source)

    def _convert_nodes(self, nodes: list[Node], source: str) -> list[Node]:
        converted: list[Node] = []
        for index, node in enumerate(nodes):
            following = nodes[index + 1] if index + 1 < len(nodes) else None
            replacement = self.converter.convert(node, following, self.component, source)
            if isinstance(replacement, Selector):
                converted.extend(replacement.nodes)
                continue
            if isinstance(replacement, Pseudo) and replacement.value != _SLOTTED:
                arguments = node.nodes if isinstance(node, Pseudo) else []
                replacement.nodes = [
                    Selector(self._convert_nodes(argument.nodes, source))
                    for argument in arguments
                ]
            converted.append(replacement)
        return converted
