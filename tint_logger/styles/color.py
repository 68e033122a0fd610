"""
Colors and the per-level color policy

Styles are emitted as ANSI SGR sequences. Every painted segment is
followed by a reset so no style leaks into later output.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tint_logger.core.log_level import LogLevel

RESET = "\033[0m"


@dataclass(frozen=True)
class Color:
    """
    A foreground color.

    Holds the SGR parameters selecting the color, e.g. ``"31"`` for red
    or ``"38;5;243"`` for a 256-color grey.
    """

    sgr: str

    @classmethod
    def ansi256(cls, index: int) -> "Color":
        """Color from the 256-color palette."""
        if not 0 <= index <= 255:
            raise ValueError("ansi256 index must be in 0..255")
        return cls(f"38;5;{index}")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        """24-bit color."""
        for part in (red, green, blue):
            if not 0 <= part <= 255:
                raise ValueError("rgb components must be in 0..255")
        return cls(f"38;2;{red};{green};{blue}")


Color.BLACK = Color("30")
Color.RED = Color("31")
Color.GREEN = Color("32")
Color.YELLOW = Color("33")
Color.BLUE = Color("34")
Color.MAGENTA = Color("35")
Color.CYAN = Color("36")
Color.WHITE = Color("37")


@dataclass(frozen=True)
class TextStyle:
    """Foreground color plus intensity flags."""

    fg: Optional[Color] = None
    bold: bool = False
    dimmed: bool = False

    @property
    def code(self) -> str:
        """Escape sequence setting this style, empty for a plain style."""
        params = []
        if self.bold:
            params.append("1")
        if self.dimmed:
            params.append("2")
        if self.fg is not None:
            params.append(self.fg.sgr)
        if not params:
            return ""
        return f"\033[{';'.join(params)}m"


def paint(text: str, style: TextStyle, enabled: bool = True) -> str:
    """
    Wrap text in a style's set and reset codes.

    Args:
        text: Segment to paint
        style: Style to apply
        enabled: If False, text is returned unchanged

    Returns:
        Painted text
    """
    code = style.code
    if not enabled or not code or not text:
        return text
    return f"{code}{text}{RESET}"


@dataclass(frozen=True)
class ColorConfig:
    """
    Color policy: one style per record level plus styles for the other
    parts of a rendered record.
    """

    level_trace: TextStyle = TextStyle(Color.BLUE)
    level_debug: TextStyle = TextStyle(Color.CYAN)
    level_info: TextStyle = TextStyle(Color.GREEN)
    level_warn: TextStyle = TextStyle(Color.YELLOW)
    level_error: TextStyle = TextStyle(Color.RED, bold=True)

    timestamp: TextStyle = TextStyle(Color.ansi256(243))
    target: TextStyle = TextStyle(Color.ansi256(131))
    continuation: TextStyle = TextStyle(Color.ansi256(237))
    message: TextStyle = TextStyle(Color.ansi256(231))

    def style_for(self, level: LogLevel) -> TextStyle:
        """
        Get the style for a record level.

        Raises:
            ValueError: For LogLevel.OFF, which never appears on a record
        """
        if level is LogLevel.ERROR:
            return self.level_error
        if level is LogLevel.WARN:
            return self.level_warn
        if level is LogLevel.INFO:
            return self.level_info
        if level is LogLevel.DEBUG:
            return self.level_debug
        if level is LogLevel.TRACE:
            return self.level_trace
        raise ValueError(f"no style for level {level}")

    @classmethod
    def default(cls) -> "ColorConfig":
        """Full color."""
        return cls()

    @classmethod
    def monochrome(cls) -> "ColorConfig":
        """Everything white."""
        white = TextStyle(Color.WHITE)
        return cls(
            level_trace=white,
            level_debug=white,
            level_info=white,
            level_warn=white,
            level_error=white,
            timestamp=white,
            target=white,
            continuation=white,
            message=white,
        )

    @classmethod
    def only_levels(cls) -> "ColorConfig":
        """Default level colors, everything else plain."""
        plain = TextStyle()
        return cls(timestamp=plain, target=plain, continuation=plain, message=plain)


class ColorChoice(Enum):
    """When to emit color codes."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def supports_color(stream, choice: ColorChoice = ColorChoice.AUTO, environ=None) -> bool:
    """
    Decide whether color codes should be written to a stream.

    NO_COLOR in the environment disables colors for every choice. With
    AUTO, colors are also off when TERM is "dumb" or the stream is not an
    interactive terminal.

    Args:
        stream: Output stream
        choice: Color choice
        environ: Environment mapping (default: os.environ)

    Returns:
        True if color codes should be emitted
    """
    environ = os.environ if environ is None else environ
    if choice is ColorChoice.NEVER or "NO_COLOR" in environ:
        return False
    if choice is ColorChoice.ALWAYS:
        return True
    if environ.get("TERM") == "dumb":
        return False

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False
