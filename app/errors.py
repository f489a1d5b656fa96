class LibraryError(Exception):
    """Base class for errors reported back to the caller."""


class ValidationError(LibraryError, ValueError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class NotFound(LibraryError, LookupError):
    pass


class Conflict(LibraryError):
    """Version mismatch or uniqueness violation."""
