from shadowstyle.parser.errors import ParseError
from shadowstyle.parser.transformer import parse_selector

__all__ = ["ParseError", "parse_selector"]
