"""Domain errors raised by the storage and service layers."""


class FilmorateError(Exception):
    """Base class; the message is meant to be shown to the caller as is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FilmorateError):
    """Input breaks a business rule (bad date, duplicate email, ...)."""


class NotFoundError(FilmorateError):
    """A referenced film or user id does not exist."""
