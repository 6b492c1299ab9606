"""Exceptions raised by the slug resolver."""


class SluggableError(Exception):
    """Base exception for slug resolution errors."""


class InvalidConfiguration(SluggableError, ValueError):
    """A slug option holds a value that is neither None, a supported literal, nor callable."""

    def __init__(self, message: str, record_type: str | None = None, field: str | None = None):
        self.record_type = record_type
        self.field = field
        super().__init__(message)


class SlugConflictError(SluggableError):
    """A record store rejected a save because a unique field already holds the value."""

    def __init__(self, message: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(message)
