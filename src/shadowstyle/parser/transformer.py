"""Lark Transformer that converts a selector parse tree into the selector model."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from shadowstyle.model.selector import (
    Attribute,
    ClassName,
    Combinator,
    Id,
    Node,
    Pseudo,
    Selector,
    SelectorList,
    Tag,
)
from shadowstyle.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into selector model nodes."""

    # ---- simple selectors ----

    def tag(self, items: list[Token]) -> Tag:
        return Tag(str(items[0]))

    def universal(self, items: list[Token]) -> Tag:
        return Tag("*")

    def class_name(self, items: list[Token]) -> ClassName:
        return ClassName(str(items[0]))

    def id_selector(self, items: list[Token]) -> Id:
        return Id(str(items[0]))

    def attr_value(self, items: list[Token]) -> tuple[str, str]:
        raw = str(items[0])
        if items[0].type == "STRING":
            return raw[1:-1], raw[0]
        return raw, ""

    def attribute(self, items: list[object]) -> Attribute:
        name = str(items[0])
        if len(items) == 1:
            return Attribute(name)
        operator = str(items[1]).strip()
        value, quote_mark = items[2]  # type: ignore[misc]
        return Attribute(name, value, operator, quote_mark)

    def nth(self, items: list[Token]) -> SelectorList:
        # "2n + 1" -> "2n+1"
        expression = "".join(str(items[0]).split())
        return SelectorList([Selector([Tag(expression)])])

    def pseudo_class(self, items: list[object]) -> Pseudo:
        return _build_pseudo(":", items)

    def pseudo_element(self, items: list[object]) -> Pseudo:
        return _build_pseudo("::", items)

    # ---- structural ----

    def compound(self, items: list[Node]) -> list[Node]:
        return list(items)

    def complex_selector(self, items: list[object]) -> Selector:
        nodes: list[Node] = []
        for item in items:
            if isinstance(item, Token):
                value = " " if item.type == "DESCENDANT" else str(item).strip()
                nodes.append(Combinator(value))
            else:
                nodes.extend(item)  # type: ignore[arg-type]
        return Selector(nodes)

    def selector_list(self, items: list[Selector]) -> SelectorList:
        return SelectorList(list(items))

    def start(self, items: list[SelectorList]) -> SelectorList:
        return items[0]


def _build_pseudo(prefix: str, items: list[object]) -> Pseudo:
    value = prefix + str(items[0])
    arguments = items[1].selectors if len(items) > 1 else []  # type: ignore[attr-defined]
    return Pseudo(value, list(arguments))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_selector(source: str) -> SelectorList:
    """Parse a selector (or comma-separated selector list) into a SelectorList."""
    try:
        tree = _parser().parse(source.strip())
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(f"Invalid selector {source!r}: {e}", line=line, column=column) from e
    return SelectorTransformer().transform(tree)
