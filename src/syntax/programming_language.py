from enum import IntEnum, auto


class ProgrammingLanguage(IntEnum):
    """Programming language enum."""
    UNKNOWN = -1
    CSS = auto()
    HTML = auto()
    JAVASCRIPT = auto()
    JSON = auto()
    TEXT = auto()
