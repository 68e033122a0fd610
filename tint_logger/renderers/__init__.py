"""
Renderers module

Single-line and multi-line layouts for log records.
"""

from typing import Optional

from tint_logger.core.options import Options
from tint_logger.renderers.base_renderer import BaseRenderer
from tint_logger.renderers.block_renderer import BlockRenderer
from tint_logger.renderers.line_renderer import LineRenderer
from tint_logger.styles.style import StyleConfig


def renderer_for(options: Optional[Options] = None) -> BaseRenderer:
    """Create the renderer selected by the options' layout style."""
    options = options or Options.default()
    if options.style is StyleConfig.SINGLE_LINE:
        return LineRenderer(options)
    return BlockRenderer(options)


__all__ = [
    "BaseRenderer",
    "BlockRenderer",
    "LineRenderer",
    "renderer_for",
]
