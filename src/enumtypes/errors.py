"""
Errors — Exception hierarchy for enumerated types.

Every failure is raised at the offending call and never retried or
recovered internally. Placeholder primitives raise the builtin
NotImplementedError instead of anything defined here.
"""


class EnumerationError(Exception):
    """Base class for all enumerated type errors."""
    pass


class DomainLookupError(EnumerationError, LookupError):
    """Raised when an integer has no corresponding variant in a domain."""
    pass


class RangeError(DomainLookupError, ValueError):
    """Raised when an integer falls outside a range or bitmask interval."""

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        super().__init__(message or f"Value '{value}' is out of range.")


class SequenceExhaustionError(DomainLookupError):
    """Raised by next()/previous() at a domain boundary."""
    pass


class MethodsLockedError(EnumerationError):
    """Raised when shared methods are registered twice on one domain."""
    pass


class DuplicateNameError(EnumerationError, ValueError):
    """Raised when a declaration repeats a variant name."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Duplicate variant names: {', '.join(names)}")
