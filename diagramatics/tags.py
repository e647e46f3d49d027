"""Well-known tag names attached by the built-in constructors."""


class TAG:
    EMPTY = "empty"
    LINE = "line"
    ARROW_HEAD = "arrow-head"
    ARROW_LINE = "arrow-line"
    LOCATOR = "locator"
    DEBUG_BBOX = "debug-bbox"
    DEBUG_ORIGIN = "debug-origin"


__all__ = ["TAG"]
