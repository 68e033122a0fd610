"""
Exception hierarchy

Configuration mistakes (bad filter text, bad timestamp format, double
initialization) are raised to the caller. Output failures are recovered
inside the dispatcher and never reach a logging call site.
"""


class LoggerError(Exception):
    """Base class for all logger errors."""


class ParseError(LoggerError, ValueError):
    """A filter specification could not be parsed."""

    def __init__(self, clause: str, reason: str):
        self.clause = clause
        self.reason = reason
        super().__init__(f"invalid filter clause {clause!r}: {reason}")


class InvalidFormatError(LoggerError, ValueError):
    """A timestamp format string was rejected."""


class AlreadyInitializedError(LoggerError):
    """The process-wide dispatcher has already been installed."""

    def __init__(self, message: str = "logger is already initialized"):
        super().__init__(message)


class OutputError(LoggerError):
    """Writing a rendered record to its sink failed."""

    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.cause = cause
