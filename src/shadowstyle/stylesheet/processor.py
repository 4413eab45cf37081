"""Rule-level processing: filter, split and rewrite every rule of a stylesheet.

Example::

    .spectrum-Search--quiet .spectrum-Search-input { border-radius: 0; }

becomes::

    :host(:where([quiet])) .spectrum-Search-input {
        /* .spectrum-Search--quiet .spectrum-Search-input */
        border-radius: 0;
    }
"""

from __future__ import annotations

import logging
import textwrap

import tinycss2

from shadowstyle.model.component import Component
from shadowstyle.parser.errors import ParseError
from shadowstyle.transforms import build_passes, transform_selector

logger = logging.getLogger(__name__)

# Global theme roots; their rules style the page, not the component.
THEME_ROOT_SELECTORS = (".spectrum", ".spectrum--express")

# At-rules whose block holds ordinary style rules.
_GROUPING_AT_RULES = {"media", "supports", "container", "layer"}

_INDENT = "    "


def _normalize(selector: str) -> str:
    return " ".join(selector.split())


class StylesheetProcessor:
    """Rewrite a component's source stylesheet for its shadow root."""

    def __init__(
        self,
        component: Component,
        dropped_selectors: tuple[str, ...] = THEME_ROOT_SELECTORS,
    ) -> None:
        self.component = component
        self.dropped_selectors = set(dropped_selectors)
        self.passes = build_passes(component)

    def process(self, css: str) -> str:
        rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
        blocks = self._process_rules(rules)
        return "\n\n".join(blocks) + "\n" if blocks else ""

    def expand(self, selector: str) -> list[str]:
        """Split *selector* according to the component's complex selectors."""
        for directive in self.component.complex_selectors:
            if _normalize(directive.selector) == selector:
                return list(directive.replacements)
        return [selector]

    def is_dropped(self, selector: str) -> bool:
        return selector in self.dropped_selectors or self.component.is_excluded(selector)

    def _process_rules(self, rules: list) -> list[str]:
        blocks: list[str] = []
        for rule in rules:
            if rule.type == "error":
                raise ParseError(
                    f"Invalid stylesheet: {rule.message}",
                    line=rule.source_line,
                    column=rule.source_column,
                )
            if rule.type == "qualified-rule":
                blocks.extend(self._process_rule(rule))
            elif rule.type == "at-rule":
                block = self._process_at_rule(rule)
                if block:
                    blocks.append(block)
        return blocks

    def _process_rule(self, rule) -> list[str]:
        selector = _normalize(tinycss2.serialize(rule.prelude))
        if self.is_dropped(selector):
            logger.debug("%s: dropped rule %r", self.component.name, selector)
            return []

        body = tinycss2.serialize(rule.content).strip()
        blocks = []
        for source in self.expand(selector):
            try:
                target = transform_selector(source, self.component, self.passes)
            except ParseError as exc:
                raise ParseError(str(exc), line=rule.source_line, column=rule.source_column) from exc
            blocks.append(_format_rule(target, source, body))
        return blocks

    def _process_at_rule(self, rule) -> str | None:
        if rule.content is None or rule.lower_at_keyword not in _GROUPING_AT_RULES:
            return rule.serialize().strip()
        prelude = tinycss2.serialize(rule.prelude).strip()
        inner = tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True)
        blocks = self._process_rules(inner)
        if not blocks:
            return None
        body = "\n\n".join(blocks)
        return f"@{rule.at_keyword} {prelude} {{\n{textwrap.indent(body, _INDENT)}\n}}"


def _format_rule(selector: str, source: str, body: str) -> str:
    lines = [f"/* {source} */"]
    lines.extend(line.strip() for line in body.splitlines() if line.strip())
    inner = textwrap.indent("\n".join(lines), _INDENT)
    return f"{selector} {{\n{inner}\n}}"


def process_stylesheet(css: str, component: Component) -> str:
    """Rewrite every rule of *css* for *component*."""
    return StylesheetProcessor(component).process(css)
