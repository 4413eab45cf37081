"""Base protocol for selector passes."""

from __future__ import annotations

from typing import Protocol

from shadowstyle.model.selector import Selector


class SelectorPass(Protocol):
    """A selector-to-selector rewrite step.

    Passes may mutate *selector* in place or return a new one; callers
    must use the returned value.
    """

    def apply(self, selector: Selector) -> Selector: ...
