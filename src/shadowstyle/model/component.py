"""Component descriptor: how one custom element's source CSS is converted."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

# Leading marker of a conversion selector -> node type it matches.
CONVERSION_TYPES: dict[str, str] = {
    ".": "class",
    ":": "pseudo",
}


@dataclass(frozen=True)
class SelectorConversion:
    """Map one source selector to an attribute or id name.

    Covers both the bare-string form (``".spectrum-Search--quiet"``) and
    the ``{selector, name}`` form.  Without a name, one is derived from
    the selector (see :meth:`Component.derive_name`).
    """

    selector: str
    name: str = ""


@dataclass(frozen=True)
class EnumValue:
    selector: str
    name: str = ""


@dataclass(frozen=True)
class EnumConversion:
    """Map several source selectors onto values of a single attribute.

    ``values`` are tried in order; the first matching selector decides
    the attribute value.
    """

    name: str
    values: tuple[EnumValue, ...] = ()


@dataclass(frozen=True)
class SlotConversion:
    selector: str
    name: str = ""
    content: str = ""  # extra selector placed inside ::slotted()


@dataclass(frozen=True)
class ClassConversion:
    selector: str
    name: str


@dataclass(frozen=True)
class PseudoConversion:
    selector: str
    value: str


@dataclass(frozen=True)
class ComplexSelector:
    """Replace one whole source selector with several source selectors."""

    selector: str
    replacements: tuple[str, ...] = ()


AttributeRule = Union[SelectorConversion, EnumConversion]


@dataclass(frozen=True)
class Component:
    """Conversion descriptor for one custom element.

    Read-only for the duration of a run; safe to share across threads.
    """

    name: str
    host: str  # host class name, without the leading "."
    attributes: tuple[AttributeRule, ...] = ()
    ids: tuple[SelectorConversion, ...] = ()
    slots: tuple[SlotConversion, ...] = ()
    classes: tuple[ClassConversion, ...] = ()
    exclude_source_selector: tuple[re.Pattern[str], ...] = ()
    exclude: tuple[re.Pattern[str], ...] = ()
    complex_selectors: tuple[ComplexSelector, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Component name must be a non-empty string")
        if not self.host:
            raise ValueError("Component host must be a non-empty class name")

    def derive_name(self, selector: str) -> str:
        """Derive an attribute/id name from a conversion selector.

        ``.spectrum-Search--quiet`` -> ``quiet``,
        ``.spectrum-Search-clearButton`` -> ``clearButton``.
        """
        name = selector.lstrip(".:")
        for prefix in (f"{self.host}--", f"{self.host}-"):
            if name.startswith(prefix):
                return name[len(prefix):]
        return name

    def is_excluded(self, selector: str) -> bool:
        """Return True if a rule with *selector* must be dropped."""
        patterns = self.exclude_source_selector + self.exclude
        return any(p.search(selector) for p in patterns)


@dataclass(frozen=True)
class PackageConfig:
    """One package's conversion config: a source stylesheet and its components."""

    spectrum: str
    package: str = ""
    components: tuple[Component, ...] = ()
