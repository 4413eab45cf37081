"""Selector tree model: simple-selector nodes, selectors and selector lists.

A ``Selector`` is the flat node sequence of one complex selector, with
compound segments and combinators interleaved::

    .a.b > .c   ->   [ClassName(a), ClassName(b), Combinator(>), ClassName(c)]

Pseudo nodes carry their argument list as ``nodes: list[Selector]``.
Trees hold no parent links; passes rebuild node lists instead.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import ClassVar, Union

# Pseudo-elements that predate the double-colon syntax.
_LEGACY_PSEUDO_ELEMENTS = {":before", ":after", ":first-letter", ":first-line"}

HOST = ":host"


@dataclass
class Tag:
    """A type selector (``div``), the universal selector (``*``), or an
    ``An+B`` argument inside a pseudo-class."""

    value: str
    type: ClassVar[str] = "tag"

    def clone(self) -> Tag:
        return Tag(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass
class ClassName:
    value: str
    type: ClassVar[str] = "class"

    def clone(self) -> ClassName:
        return ClassName(self.value)

    def __str__(self) -> str:
        return f".{self.value}"


@dataclass
class Id:
    value: str
    type: ClassVar[str] = "id"

    def clone(self) -> Id:
        return Id(self.value)

    def __str__(self) -> str:
        return f"#{self.value}"


@dataclass
class Attribute:
    """An attribute predicate.

    ``value`` is stored without quotes; ``quote_mark`` records how it was
    written so serialization can reproduce it.
    """

    attribute: str
    value: str = ""
    operator: str = ""
    quote_mark: str = ""
    type: ClassVar[str] = "attribute"

    def clone(self) -> Attribute:
        return Attribute(self.attribute, self.value, self.operator, self.quote_mark)

    def __str__(self) -> str:
        if not self.operator:
            return f"[{self.attribute}]"
        q = self.quote_mark
        return f"[{self.attribute}{self.operator}{q}{self.value}{q}]"


@dataclass
class Pseudo:
    """A pseudo-class or pseudo-element, with an optional argument list."""

    value: str
    nodes: list[Selector] = field(default_factory=list)
    type: ClassVar[str] = "pseudo"

    @property
    def first(self) -> Selector | None:
        return self.nodes[0] if self.nodes else None

    @property
    def is_element(self) -> bool:
        return self.value.startswith("::") or self.value in _LEGACY_PSEUDO_ELEMENTS

    def clone(self) -> Pseudo:
        return Pseudo(self.value, [s.clone() for s in self.nodes])

    def __str__(self) -> str:
        if not self.nodes:
            return self.value
        return f"{self.value}({', '.join(str(s) for s in self.nodes)})"


@dataclass
class Combinator:
    """One of ``" "`` (descendant), ``">"``, ``"+"`` or ``"~"``."""

    value: str
    type: ClassVar[str] = "combinator"

    @property
    def is_descendant(self) -> bool:
        return self.value == " "

    def clone(self) -> Combinator:
        return Combinator(self.value)

    def __str__(self) -> str:
        if self.is_descendant:
            return " "
        return f" {self.value} "


Node = Union[Tag, ClassName, Id, Attribute, Pseudo, Combinator]


@dataclass
class Selector:
    """A complex selector as a flat sequence of nodes.

    ``source`` holds the selector text as it read before any pass ran; it
    is only used for diagnostics and never serialized.
    """

    nodes: list[Node] = field(default_factory=list)
    source: str = field(default="", compare=False)

    @property
    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    def clone(self) -> Selector:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        # A leading combinator (relative selector) has no left-hand side.
        text = "".join(str(n) for n in self.nodes)
        return text.lstrip(" ")


@dataclass
class SelectorList:
    """A comma-separated list of complex selectors."""

    selectors: list[Selector] = field(default_factory=list)

    def __iter__(self):
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __str__(self) -> str:
        return ", ".join(str(s) for s in self.selectors)


def is_host_anchor(node: object) -> bool:
    """Return True if *node* is a ``:host`` pseudo-class."""
    return isinstance(node, Pseudo) and node.value == HOST
