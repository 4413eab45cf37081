"""Tests for the selector and component models."""

import re

import pytest

from shadowstyle.model import (
    Attribute,
    ClassName,
    Combinator,
    Component,
    Id,
    Pseudo,
    Selector,
    SelectorList,
    Tag,
    is_host_anchor,
)


class TestSerialization:
    def test_boolean_attribute(self) -> None:
        assert str(Attribute("quiet")) == "[quiet]"

    def test_valued_attribute(self) -> None:
        assert str(Attribute("variant", "cta", "=", '"')) == '[variant="cta"]'

    def test_unquoted_attribute(self) -> None:
        assert str(Attribute("dir", "rtl", "=")) == "[dir=rtl]"

    def test_combinators(self) -> None:
        assert str(Combinator(" ")) == " "
        assert str(Combinator(">")) == " > "
        assert str(Combinator("~")) == " ~ "

    def test_nested_pseudo(self) -> None:
        node = Pseudo(
            ":host",
            [Selector([Pseudo(":where", [Selector([Attribute("quiet")])])])],
        )
        assert str(node) == ":host(:where([quiet]))"

    def test_selector(self) -> None:
        selector = Selector(
            [Pseudo(":host"), Combinator(" "), Id("button"), ClassName("is-open")]
        )
        assert str(selector) == ":host #button.is-open"

    def test_selector_list(self) -> None:
        selectors = SelectorList([Selector([Tag("a")]), Selector([Tag("b")])])
        assert str(selectors) == "a, b"
        assert len(selectors) == 2


class TestNodes:
    def test_host_anchor(self) -> None:
        assert is_host_anchor(Pseudo(":host"))
        assert is_host_anchor(Pseudo(":host", [Selector([Attribute("quiet")])]))
        assert not is_host_anchor(Pseudo(":hover"))
        assert not is_host_anchor(ClassName("host"))
        assert not is_host_anchor(None)

    def test_clone_is_deep(self) -> None:
        original = Pseudo(":not", [Selector([ClassName("a")])])
        copy = original.clone()
        copy.nodes[0].nodes[0].value = "b"
        assert str(original) == ":not(.a)"
        assert str(copy) == ":not(.b)"

    def test_source_is_not_compared(self) -> None:
        assert Selector([Tag("a")], source=".x") == Selector([Tag("a")])

    def test_first(self) -> None:
        assert Selector().first is None
        assert Pseudo(":hover").first is None


class TestComponent:
    @pytest.fixture()
    def component(self) -> Component:
        return Component(
            name="search",
            host="spectrum-Search",
            exclude=(re.compile(r"--small"),),
            exclude_source_selector=(re.compile(r"^\.is-"),),
        )

    @pytest.mark.parametrize(
        ("selector", "name"),
        [
            (".spectrum-Search--quiet", "quiet"),
            (".spectrum-Search-clearButton", "clearButton"),
            (":disabled", "disabled"),
            (".is-open", "is-open"),
        ],
    )
    def test_derive_name(self, component: Component, selector: str, name: str) -> None:
        assert component.derive_name(selector) == name

    def test_excluded_by_either_pattern_list(self, component: Component) -> None:
        assert component.is_excluded(".spectrum-Search--small .x")
        assert component.is_excluded(".is-open")
        assert not component.is_excluded(".spectrum-Search .is-open")

    def test_requires_name(self) -> None:
        with pytest.raises(ValueError):
            Component(name="", host="spectrum-Search")

    def test_requires_host(self) -> None:
        with pytest.raises(ValueError):
            Component(name="search", host="")
