"""
Renderer options

Layout style, color policy and timestamp configuration, fixed once a
writer is built from them.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from tint_logger.styles.color import ColorChoice, ColorConfig
from tint_logger.styles.style import StyleConfig
from tint_logger.styles.time import TimeConfig


@dataclass(frozen=True)
class Options:
    """
    Renderer configuration.

    A color of None disables colors regardless of the terminal.
    """

    style: StyleConfig = StyleConfig.MULTI_LINE
    color: Optional[ColorConfig] = field(default_factory=ColorConfig.default)
    time: TimeConfig = field(default_factory=TimeConfig.none)
    color_choice: ColorChoice = ColorChoice.AUTO

    def __post_init__(self):
        """Validate options after initialization."""
        if not isinstance(self.style, StyleConfig):
            raise TypeError("style must be StyleConfig")
        if self.color is not None and not isinstance(self.color, ColorConfig):
            raise TypeError("color must be ColorConfig or None")
        if not isinstance(self.time, TimeConfig):
            raise TypeError("time must be TimeConfig")
        if not isinstance(self.color_choice, ColorChoice):
            raise TypeError("color_choice must be ColorChoice")

    def with_style(self, style: StyleConfig) -> "Options":
        """Copy with another layout style."""
        return replace(self, style=style)

    def with_color(self, color: Optional[ColorConfig]) -> "Options":
        """Copy with another color policy, or None to disable colors."""
        return replace(self, color=color)

    def with_time(self, time: TimeConfig) -> "Options":
        """Copy with another timestamp configuration."""
        return replace(self, time=time)

    def with_color_choice(self, choice: ColorChoice) -> "Options":
        """Copy with another color choice."""
        return replace(self, color_choice=choice)

    @property
    def colors_enabled(self) -> bool:
        """Whether colors may be emitted at all."""
        return self.color is not None and self.color_choice is not ColorChoice.NEVER

    @classmethod
    def default(cls) -> "Options":
        """Create default options: multi-line, full color, no timestamp."""
        return cls()

    @classmethod
    def compact(cls) -> "Options":
        """Single-line output with only the levels colored."""
        return cls(style=StyleConfig.SINGLE_LINE, color=ColorConfig.only_levels())

    @classmethod
    def plain(cls) -> "Options":
        """Single-line output without colors."""
        return cls(style=StyleConfig.SINGLE_LINE, color=None)
