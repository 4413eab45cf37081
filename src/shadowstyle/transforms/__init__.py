import logging

from shadowstyle.converters import (
    AttributeConverter,
    ClassConverter,
    IdConverter,
    PseudoConverter,
    SlotConverter,
)
from shadowstyle.model.component import Component
from shadowstyle.model.selector import SelectorList
from shadowstyle.parser import parse_selector
from shadowstyle.transforms.base import SelectorPass
from shadowstyle.transforms.convert import ConvertPass
from shadowstyle.transforms.dehostify import DehostifyPass
from shadowstyle.transforms.hoist_dir import HoistDirPass
from shadowstyle.transforms.hostify import HostifyPass
from shadowstyle.transforms.whereify import WhereifyHostPass

logger = logging.getLogger(__name__)


def build_passes(component):
    """Return the passes for *component* in the order they must run."""
    return [
        HostifyPass(component.host),
        HoistDirPass(),
        ConvertPass(component, AttributeConverter()),
        ConvertPass(component, ClassConverter()),
        ConvertPass(component, SlotConverter()),
        ConvertPass(component, IdConverter()),
        ConvertPass(component, PseudoConverter()),
        WhereifyHostPass(),
        DehostifyPass(),
    ]


def apply_passes(selector, passes):
    """Run *selector* through *passes* in order."""
    for p in passes:
        selector = p.apply(selector)
    return selector


def transform_selector(source: str, component: Component, passes=None) -> str:
    """Rewrite a source selector (list) into its shadow-DOM form for *component*."""
    if passes is None:
        passes = build_passes(component)
    result = SelectorList()
    for selector in parse_selector(source):
        selector.source = str(selector)
        result.selectors.append(apply_passes(selector, passes))
    rewritten = str(result)
    logger.debug("%s: %r -> %r", component.name, source, rewritten)
    return rewritten


__all__ = [
    "SelectorPass",
    "HostifyPass",
    "HoistDirPass",
    "ConvertPass",
    "WhereifyHostPass",
    "DehostifyPass",
    "build_passes",
    "apply_passes",
    "transform_selector",
]
