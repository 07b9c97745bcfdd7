"""Errors raised by the analyzer and its entry sources."""


class AccessTallyError(Exception):
    """Base class for all accesstally errors."""


class InitializationError(AccessTallyError):
    """The entry source could not be established."""


class UninitializedHistogramError(AccessTallyError):
    """A histogram was used that the analyzer never allocated."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} histogram is not initialized")
        self.name = name


class ExhaustedError(AccessTallyError, LookupError):
    """next() was called on an entry source with no entries left."""


class OutOfRangeError(AccessTallyError, ValueError):
    """An entry field falls outside its histogram's domain.

    Attributes:
        field: Name of the offending field (hour, day or month).
        value: The value that was rejected.
    """

    def __init__(self, field: str, value: int, first: int, last: int) -> None:
        super().__init__(f"{field}={value} outside {first}..{last}")
        self.field = field
        self.value = value
