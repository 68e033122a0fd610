"""Layout style"""

from enum import Enum


class StyleConfig(Enum):
    """
    Line breaking style of rendered records.

    Defaults to MULTI_LINE.
    """

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"

    @classmethod
    def default(cls) -> "StyleConfig":
        return cls.MULTI_LINE
