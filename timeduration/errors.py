"""Exceptions raised while parsing duration strings."""


class DurationParseError(ValueError):
    """Base class for failures while scanning a duration string."""

    def __init__(self, message: str, *, source: str, position: int):
        super().__init__(message)
        self.source: str = source
        self.position: int = position


class NumberFormatError(DurationParseError):
    """A run of digits could not be converted to an integer."""


class UnknownUnitError(DurationParseError):
    """A unit literal is not in the unit table (strict mode only)."""

    def __init__(self, message: str, *, source: str, position: int, unit: str):
        super().__init__(message, source=source, position=position)
        self.unit: str = unit
