"""Rewrite global component CSS into shadow-DOM scoped CSS."""

__version__ = "0.1.0"

from shadowstyle.config import ConfigError, load_config  # noqa: E402
from shadowstyle.model.component import Component  # noqa: E402
from shadowstyle.parser import ParseError, parse_selector  # noqa: E402
from shadowstyle.stylesheet import process_stylesheet  # noqa: E402
from shadowstyle.transforms import transform_selector  # noqa: E402

__all__ = [
    "__version__",
    "Component",
    "ConfigError",
    "ParseError",
    "load_config",
    "parse_selector",
    "process_stylesheet",
    "transform_selector",
]
