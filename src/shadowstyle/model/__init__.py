"""Shadowstyle model layer -- public type re-exports."""

from shadowstyle.model.component import (
    CONVERSION_TYPES,
    AttributeRule,
    ClassConversion,
    Component,
    ComplexSelector,
    EnumConversion,
    EnumValue,
    PackageConfig,
    PseudoConversion,
    SelectorConversion,
    SlotConversion,
)
from shadowstyle.model.selector import (
    HOST,
    Attribute,
    ClassName,
    Combinator,
    Id,
    Node,
    Pseudo,
    Selector,
    SelectorList,
    Tag,
    is_host_anchor,
)

__all__ = [
    # selector tree
    "HOST",
    "Tag",
    "ClassName",
    "Id",
    "Attribute",
    "Pseudo",
    "Combinator",
    "Node",
    "Selector",
    "SelectorList",
    "is_host_anchor",
    # component descriptor
    "CONVERSION_TYPES",
    "AttributeRule",
    "SelectorConversion",
    "EnumConversion",
    "EnumValue",
    "SlotConversion",
    "ClassConversion",
    "PseudoConversion",
    "ComplexSelector",
    "Component",
    "PackageConfig",
]
