# ptvline/errors.py


class PtvLineError(Exception):
    """Base for failures that abort a whole command."""


class NormalizationError(PtvLineError, ValueError):
    pass


class InvalidTimezone(NormalizationError):
    def __init__(self, timezone):
        super().__init__(f"unknown timezone: {timezone!r}")
        self.timezone = timezone


class NotASequence(NormalizationError):
    def __init__(self, value):
        super().__init__(f"expected a sequence of records, got {type(value).__name__}")


class ApiError(PtvLineError):
    pass


class UsageError(PtvLineError):
    pass
