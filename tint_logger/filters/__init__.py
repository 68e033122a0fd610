"""
Log filters module

Directive parsing and the level filter built on it.
"""

from tint_logger.filters.base_filter import BaseFilter
from tint_logger.filters.directive import DEFAULT_LEVEL, Directive, DirectiveSet
from tint_logger.filters.directive_parser import ENV_VAR, from_env, parse
from tint_logger.filters.level_filter import DirectiveFilter, enabled

__all__ = [
    "BaseFilter",
    "DEFAULT_LEVEL",
    "Directive",
    "DirectiveSet",
    "DirectiveFilter",
    "ENV_VAR",
    "enabled",
    "from_env",
    "parse",
]
