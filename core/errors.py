"""Errors raised while reading remote JSON records."""

from typing import Optional


class RecordError(Exception):
    """Base exception for a remote document that does not have the expected shape."""

    def __init__(self, record: str, field: str, message: str) -> None:
        self.record = record
        self.field = field
        super().__init__(message)


class MissingFieldError(RecordError):
    """A required field is absent (or null where a value is required)."""

    def __init__(self, record: str, field: str, message: Optional[str] = None) -> None:
        super().__init__(record, field, message or f"{record}: missing required field '{field}'")


class FieldTypeError(RecordError):
    """A field is present but holds the wrong JSON type."""

    def __init__(self, record: str, field: str, expected: str, value: object) -> None:
        self.expected = expected
        super().__init__(
            record,
            field,
            f"{record}: field '{field}' should be {expected}, got {type(value).__name__}",
        )
