"""Error types raised while loading, reading and filling AcroForm fields."""

from __future__ import annotations

from pypdf.generic import IndirectObject


class LoadError(RuntimeError):
    """Raised when a document cannot be loaded as a form."""


class DocumentIoError(LoadError):
    """Raised when the document bytes cannot be read or parsed."""


class DictionaryKeyNotFoundError(LoadError):
    """Raised when a key needed to locate the form fields is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Required dictionary key not found: {key}")
        self.key = key


class NoSuchReferenceError(LoadError):
    """Raised when a reference does not point at any object."""

    def __init__(self, reference: IndirectObject) -> None:
        super().__init__(
            f"Reference {reference.idnum} {reference.generation} R does not resolve"
        )
        self.reference = reference


class NotAReferenceError(LoadError):
    """Raised when a direct value appears where a reference was required."""


class UnexpectedTypeError(LoadError):
    """Raised when a value does not have the shape discovery requires."""


class FieldValidationError(LoadError):
    """Raised by the optional validation pass when fields are malformed."""

    def __init__(self, issues: list[tuple[int, str]]) -> None:
        summary = "; ".join(f"field {index}: {reason}" for index, reason in issues)
        super().__init__(f"{len(issues)} malformed field(s): {summary}")
        self.issues = issues


class MalformedFieldError(RuntimeError):
    """A discovered field dictionary broke the read contract."""


class FieldValueError(ValueError):
    """Raised when a value cannot be written to a field."""


class TypeMismatchError(FieldValueError):
    """The setter does not match the field's actual type."""


class InvalidSelectionError(FieldValueError):
    """One or more values are not among the field's options."""


class TooManySelectedError(FieldValueError):
    """Several values were given to a single-select field."""


class PdfWriteError(RuntimeError):
    """Raised when output generation fails."""
