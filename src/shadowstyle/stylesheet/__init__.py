from shadowstyle.stylesheet.processor import (
    THEME_ROOT_SELECTORS,
    StylesheetProcessor,
    process_stylesheet,
)

__all__ = ["THEME_ROOT_SELECTORS", "StylesheetProcessor", "process_stylesheet"]
