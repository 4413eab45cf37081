"""Run settings and loading of component conversion configs from JSON."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shadowstyle.model.component import (
    AttributeRule,
    ClassConversion,
    Component,
    ComplexSelector,
    EnumConversion,
    EnumValue,
    PackageConfig,
    SelectorConversion,
    SlotConversion,
)


@dataclass(frozen=True)
class ShadowStyleConfig:
    output_prefix: str = "spectrum-"
    output_suffix: str = ".css"
    max_workers: int | None = None  # None lets the executor decide
    encoding: str = "utf-8"


class ConfigError(Exception):
    """Raised when a conversion config cannot be loaded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Conversion shapes
# ---------------------------------------------------------------------------


def _selector_conversion(raw: Any, field_name: str) -> SelectorConversion:
    if isinstance(raw, str):
        return SelectorConversion(selector=raw)
    if isinstance(raw, dict) and "selector" in raw:
        return SelectorConversion(selector=raw["selector"], name=raw.get("name", ""))
    raise ConfigError(f"invalid {field_name} conversion: {raw!r}")


def _enum_conversion(raw: dict[str, Any]) -> EnumConversion:
    if not raw.get("name"):
        raise ConfigError(f"enum conversion needs a name: {raw!r}")
    values: list[EnumValue] = []
    for value in raw.get("values", []):
        if isinstance(value, str):
            values.append(EnumValue(selector=value))
        elif isinstance(value, dict) and "selector" in value:
            values.append(EnumValue(selector=value["selector"], name=value.get("name", "")))
        else:
            raise ConfigError(f"invalid enum value: {value!r}")
    return EnumConversion(name=raw["name"], values=tuple(values))


def _attribute_rule(raw: Any) -> AttributeRule:
    if isinstance(raw, dict) and raw.get("type") == "enum":
        return _enum_conversion(raw)
    return _selector_conversion(raw, "attribute")


def _slot_conversion(raw: Any) -> SlotConversion:
    if isinstance(raw, str):
        return SlotConversion(selector=raw)
    if isinstance(raw, dict) and "selector" in raw:
        return SlotConversion(
            selector=raw["selector"],
            name=raw.get("name", ""),
            content=raw.get("content", ""),
        )
    raise ConfigError(f"invalid slot conversion: {raw!r}")


def _class_conversion(raw: Any) -> ClassConversion:
    if isinstance(raw, dict) and "selector" in raw and "name" in raw:
        return ClassConversion(selector=raw["selector"], name=raw["name"])
    raise ConfigError(f"invalid class conversion: {raw!r}")


def _complex_selector(raw: Any) -> ComplexSelector:
    if not isinstance(raw, dict) or "selector" not in raw or "replacement" not in raw:
        raise ConfigError(f"invalid complex selector: {raw!r}")
    replacement = raw["replacement"]
    if isinstance(replacement, str):
        replacement = [replacement]
    return ComplexSelector(selector=raw["selector"], replacements=tuple(replacement))


def _patterns(raw: list[Any]) -> tuple[re.Pattern[str], ...]:
    patterns = []
    for pattern in raw:
        try:
            patterns.append(re.compile(pattern))
        except (re.error, TypeError) as exc:
            raise ConfigError(f"invalid exclude pattern {pattern!r}: {exc}") from exc
    return tuple(patterns)


# ---------------------------------------------------------------------------
# Components and packages
# ---------------------------------------------------------------------------


def component_from_dict(data: dict[str, Any]) -> Component:
    """Build a Component from its JSON object form."""
    if not isinstance(data, dict):
        raise ConfigError(f"component must be an object, got {type(data).__name__}")
    name = data.get("name")
    host = data.get("host")
    if not name:
        raise ConfigError("component is missing 'name'")
    if isinstance(host, dict):
        # Only the source selector matters; "shadowSelector" is ignored.
        host = host.get("selector")
    if not isinstance(host, str) or not host.lstrip("."):
        raise ConfigError(f"component {name!r} is missing 'host'")

    return Component(
        name=name,
        host=host.lstrip("."),
        attributes=tuple(_attribute_rule(a) for a in data.get("attributes", [])),
        ids=tuple(_selector_conversion(i, "id") for i in data.get("ids", [])),
        slots=tuple(_slot_conversion(s) for s in data.get("slots", [])),
        classes=tuple(_class_conversion(c) for c in data.get("classes", [])),
        exclude_source_selector=_patterns(data.get("excludeSourceSelector", [])),
        exclude=_patterns(data.get("exclude", [])),
        complex_selectors=tuple(
            _complex_selector(c) for c in data.get("complexSelectors", [])
        ),
    )


def package_from_dict(data: dict[str, Any]) -> PackageConfig:
    if not isinstance(data, dict) or not data.get("spectrum"):
        raise ConfigError("package config is missing 'spectrum'")
    return PackageConfig(
        spectrum=data["spectrum"],
        package=data.get("package", data["spectrum"]),
        components=tuple(component_from_dict(c) for c in data.get("components", [])),
    )


def load_config(path: str | Path) -> list[PackageConfig]:
    """Load one package config, or a list of them, from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config: {exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}", path=str(path)) from exc

    items = data if isinstance(data, list) else [data]
    try:
        return [package_from_dict(item) for item in items]
    except ConfigError as exc:
        raise ConfigError(str(exc), path=str(path)) from exc


def find_component(configs: list[PackageConfig], name: str) -> Component:
    """Return the component called *name* from any of *configs*."""
    for config in configs:
        for component in config.components:
            if component.name == name:
                return component
    known = ", ".join(c.name for config in configs for c in config.components)
    raise ConfigError(f"unknown component {name!r} (known: {known or 'none'})")
