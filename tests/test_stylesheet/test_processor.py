"""Tests for rule-level stylesheet processing."""

import re
from pathlib import Path

import pytest

from shadowstyle import ParseError, load_config, process_stylesheet
from shadowstyle.config import find_component
from shadowstyle.model import Component, ComplexSelector
from shadowstyle.stylesheet import StylesheetProcessor

FIXTURES = Path(__file__).parent.parent / "fixtures"

COMPONENT = Component(
    name="search",
    host="spectrum-Search",
    exclude=(re.compile(r"--small"),),
    complex_selectors=(
        ComplexSelector(
            ".spectrum-Search .is-focused",
            (".spectrum-Search:focus-within", ".spectrum-Search.is-keyboardFocused"),
        ),
    ),
)


class TestStylesheetProcessor:
    def test_single_rule(self) -> None:
        output = process_stylesheet(".spectrum-Search { display: block; }", COMPONENT)
        assert output == ":host {\n    /* .spectrum-Search */\n    display: block;\n}\n"

    def test_declarations_one_per_line(self) -> None:
        css = ".x {\n  color: red;\n\n  margin: 0;\n}"
        output = process_stylesheet(css, COMPONENT)
        assert output == ".x {\n    /* .x */\n    color: red;\n    margin: 0;\n}\n"

    def test_rules_separated_by_blank_line(self) -> None:
        output = process_stylesheet(".a { color: red; } .b { color: blue; }", COMPONENT)
        assert output == (
            ".a {\n    /* .a */\n    color: red;\n}\n\n"
            ".b {\n    /* .b */\n    color: blue;\n}\n"
        )

    def test_selector_list_rule(self) -> None:
        output = process_stylesheet(".spectrum-Search, .a { color: red; }", COMPONENT)
        assert output.startswith(":host, .a {\n    /* .spectrum-Search, .a */")

    @pytest.mark.parametrize("selector", [".spectrum", ".spectrum--express"])
    def test_theme_roots_dropped(self, selector: str) -> None:
        assert process_stylesheet(f"{selector} {{ --x: 1px; }}", COMPONENT) == ""

    def test_excluded_rule_dropped(self) -> None:
        css = ".spectrum-Search--small { height: 24px; } .a { color: red; }"
        output = process_stylesheet(css, COMPONENT)
        assert "small" not in output
        assert output.startswith(".a {")

    def test_complex_selector_expanded(self) -> None:
        css = ".spectrum-Search   .is-focused { outline: none; }"
        output = process_stylesheet(css, COMPONENT)
        assert ":host(:where(:focus-within)) {\n    /* .spectrum-Search:focus-within */" in output
        assert ":host(:where(.is-keyboardFocused)) {" in output
        assert output.count("outline: none;") == 2

    def test_expand(self) -> None:
        processor = StylesheetProcessor(COMPONENT)
        assert processor.expand(".spectrum-Search .is-focused") == [
            ".spectrum-Search:focus-within",
            ".spectrum-Search.is-keyboardFocused",
        ]
        assert processor.expand(".other") == [".other"]

    def test_media_rules_rewritten(self) -> None:
        css = "@media (forced-colors: active) { .spectrum-Search { color: CanvasText; } }"
        output = process_stylesheet(css, COMPONENT)
        assert output == (
            "@media (forced-colors: active) {\n"
            "    :host {\n"
            "        /* .spectrum-Search */\n"
            "        color: CanvasText;\n"
            "    }\n"
            "}\n"
        )

    def test_grouping_rule_left_empty_is_dropped(self) -> None:
        css = "@supports (display: grid) { .spectrum { display: grid; } }"
        assert process_stylesheet(css, COMPONENT) == ""

    def test_other_at_rules_verbatim(self) -> None:
        css = "@keyframes fade { from { opacity: 0; } to { opacity: 1; } }"
        output = process_stylesheet(css, COMPONENT)
        assert output.startswith("@keyframes fade {")
        assert "from { opacity: 0; }" in output

    def test_comments_skipped(self) -> None:
        output = process_stylesheet("/* header */ .a { color: red; }", COMPONENT)
        assert "header" not in output

    def test_empty_stylesheet(self) -> None:
        assert process_stylesheet("", COMPONENT) == ""

    def test_bad_selector_reports_rule_line(self) -> None:
        css = ".a { color: red; }\n\n.b > { color: blue; }"
        with pytest.raises(ParseError) as exc_info:
            process_stylesheet(css, COMPONENT)
        assert exc_info.value.line == 3

    def test_unterminated_rule(self) -> None:
        with pytest.raises(ParseError, match="Invalid stylesheet"):
            process_stylesheet(".a { color: red; }\n.b", COMPONENT)


class TestSearchFixture:
    @pytest.fixture(scope="class")
    def output(self) -> str:
        component = find_component(load_config(FIXTURES / "search.json"), "search")
        return process_stylesheet((FIXTURES / "search.css").read_text(), component)

    def test_host_rule(self, output: str) -> None:
        assert output.startswith(
            ":host {\n"
            "    /* .spectrum-Search */\n"
            "    display: inline-block;\n"
            "    position: relative;\n"
            "}\n"
        )

    def test_theme_root_gone(self, output: str) -> None:
        assert "--spectrum-global-dimension-size-100" not in output

    def test_attribute_rule(self, output: str) -> None:
        assert ":host(:where([quiet])) .input {" in output

    def test_direction_rule(self, output: str) -> None:
        assert ':host(:where([dir="rtl"])) .icon {' in output
        assert '/* [dir="rtl"] .spectrum-Search-icon */' in output

    def test_complex_selector_rules(self, output: str) -> None:
        assert "#textfield:focus-within .input {" in output
        assert "#textfield.is-keyboardFocused .input {" in output
        assert "is-focused" not in output

    def test_media_block(self, output: str) -> None:
        assert "@media (forced-colors: active) {\n    #button {" in output

    def test_keyframes_kept(self, output: str) -> None:
        assert "@keyframes spectrum-Search-fade" in output

    def test_excluded_rule(self, output: str) -> None:
        assert "--small" not in output
        assert "24px" not in output
