"""
Filter specification parser

Grammar: comma-separated clauses, each either a bare level name, which
sets the default level, or ``target=level``, which adds a directive.

Example:
    "warn,my_app=info,my_app.db=trace"
"""

import os
from typing import List, Mapping, Optional

from tint_logger.core.errors import ParseError
from tint_logger.core.log_level import LogLevel
from tint_logger.filters.directive import DEFAULT_LEVEL, Directive, DirectiveSet

# Environment variable holding the filter specification
ENV_VAR = "TINT_LOG"


def _parse_level(clause: str, text: str) -> LogLevel:
    if not text:
        raise ParseError(clause, "missing level name")
    try:
        return LogLevel.from_string(text)
    except ValueError:
        raise ParseError(clause, f"unknown level {text!r}") from None


def parse(spec: Optional[str]) -> DirectiveSet:
    """
    Parse a filter specification.

    Whitespace around clauses and around ``=`` is ignored, as are empty
    clauses left by doubled or trailing commas.

    Args:
        spec: Specification text, or None

    Returns:
        Parsed DirectiveSet. An empty specification yields no directives
        and the default level.

    Raises:
        ParseError: On an unknown level name or an empty target
    """
    default = DEFAULT_LEVEL
    directives: List[Directive] = []

    for raw in (spec or "").split(","):
        clause = raw.strip()
        if not clause:
            continue

        if "=" not in clause:
            default = _parse_level(clause, clause)
            continue

        target, _, level_text = clause.partition("=")
        target = target.strip()
        if not target:
            raise ParseError(clause, "missing target")
        directives.append(Directive(target, _parse_level(clause, level_text.strip())))

    return DirectiveSet(tuple(directives), default)


def from_env(
    var: str = ENV_VAR,
    environ: Optional[Mapping[str, str]] = None,
    strict: bool = True
) -> DirectiveSet:
    """
    Read and parse the filter specification from the environment.

    Args:
        var: Environment variable name
        environ: Mapping to read from (default: os.environ)
        strict: If False, a malformed value falls back to the defaults
                instead of raising

    Returns:
        Parsed DirectiveSet

    Raises:
        ParseError: If the value is malformed and strict is True
    """
    environ = os.environ if environ is None else environ
    try:
        return parse(environ.get(var))
    except ParseError:
        if strict:
            raise
        return DirectiveSet()
