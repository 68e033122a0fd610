"""
Filter directives

A directive enables records whose target starts with a prefix, down to a
minimum level. A DirectiveSet keeps directives in the order they were
written and picks the longest matching prefix for each target.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from tint_logger.core.log_level import LogLevel

# Default level for filter text without a bare level name
DEFAULT_LEVEL = LogLevel.INFO


@dataclass(frozen=True)
class Directive:
    """A single (target prefix, minimum level) rule."""

    target: str
    level: LogLevel

    def matches(self, target: str) -> bool:
        """Plain character prefix test, not aware of path segments."""
        return target.startswith(self.target)


@dataclass(frozen=True)
class DirectiveSet:
    """
    Ordered directives plus a default level.

    Lookup rules:
        - Among directives whose target is a prefix of the record target,
          the longest prefix governs.
        - Equal lengths can only mean identical prefixes; the directive
          written last wins.
        - Without any match the default level applies.
    """

    directives: Tuple[Directive, ...] = ()
    default: LogLevel = DEFAULT_LEVEL

    def __post_init__(self):
        """Freeze the directive sequence."""
        if not isinstance(self.directives, tuple):
            object.__setattr__(self, "directives", tuple(self.directives))

    def find(self, target: str) -> Optional[Directive]:
        """
        Find the directive governing a target.

        Args:
            target: Record target

        Returns:
            Governing directive, or None if no prefix matches
        """
        best: Optional[Directive] = None
        for directive in self.directives:
            if not directive.matches(target):
                continue
            # >= so that a later identical prefix replaces an earlier one
            if best is None or len(directive.target) >= len(best.target):
                best = directive
        return best

    def minimum_for(self, target: str) -> LogLevel:
        """Minimum level enabled for a target."""
        directive = self.find(target)
        return directive.level if directive is not None else self.default

    def __len__(self) -> int:
        return len(self.directives)

    def __str__(self) -> str:
        """Render back into filter specification text."""
        clauses = [str(self.default).lower()]
        clauses.extend(
            f"{d.target}={str(d.level).lower()}" for d in self.directives
        )
        return ",".join(clauses)
