"""
Styles module

Colors, layout style and timestamp configuration.
"""

from tint_logger.styles.color import (
    Color,
    ColorChoice,
    ColorConfig,
    TextStyle,
    paint,
    supports_color,
)
from tint_logger.styles.style import StyleConfig
from tint_logger.styles.time import TimeConfig

__all__ = [
    "Color",
    "ColorChoice",
    "ColorConfig",
    "StyleConfig",
    "TextStyle",
    "TimeConfig",
    "paint",
    "supports_color",
]
