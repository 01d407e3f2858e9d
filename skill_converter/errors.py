"""Exceptions raised while converting a Skill document."""
from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base exception for every conversion stage."""

    def __init__(self, message: str, field_path: Optional[str] = None) -> None:
        self.message = message
        self.field_path = field_path
        super().__init__(f"{field_path}: {message}" if field_path else message)


class SourceUnavailable(ConversionError):
    """Raised when nothing was selected or the source cannot be read."""


class ParseFailure(ConversionError):
    """Raised when the document is not well-formed JSON."""


class MissingRequiredField(ConversionError):
    """Raised when a non-optional field is absent."""

    def __init__(self, field_path: str) -> None:
        super().__init__("missing required field", field_path)


class TypeMismatch(ConversionError):
    """Raised when a field is a scalar/object/list where the schema wants another shape."""


class InvalidEnumValue(ConversionError):
    """Raised when a wire string matches no enumerator."""


class InvalidNumericValue(ConversionError):
    """Raised when a number does not fit its declared range."""


class EncodingFailure(ConversionError):
    """Raised when a CSV section is not exactly one header and one value line."""


class SinkWriteFailure(ConversionError):
    """Raised when the CSV output cannot be written."""
