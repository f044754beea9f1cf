"""The one exception raised by argument validation."""


class InvalidArgumentError(ValueError):
    """A value violates a descriptor or builder constraint.

    ``field`` names the offending field (``"Id"``, ``"Label"``, ...) so
    callers and tests can tell violations apart without parsing messages.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
