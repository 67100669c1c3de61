"""Custom exceptions for data loading, decoding and registry construction."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from shooterdefs.services.diagnostics import Diagnostic


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when definition files are missing or invalid."""


class DataValidationError(DataError):
    """Raised when content fails structural validation."""


class DecodeError(DataValidationError):
    """Raised when a raw record cannot be decoded into a typed definition."""

    def __init__(self, message: str, *, record_id: str | None = None, field_path: str | None = None) -> None:
        self.record_id = record_id
        self.field_path = field_path
        super().__init__(message)


class UnknownVariantError(DecodeError):
    """Raised when a variant tag is not recognized."""

    def __init__(self, tag: str, *, record_id: str | None = None, field_path: str | None = None) -> None:
        self.tag = tag
        super().__init__(
            f"{_where(record_id, field_path)}unknown variant '{tag}'.",
            record_id=record_id,
            field_path=field_path,
        )


class MissingPayloadFieldError(DecodeError):
    """Raised when a variant payload lacks a field its tag requires."""

    def __init__(self, name: str, *, record_id: str | None = None, field_path: str | None = None) -> None:
        self.name = name
        super().__init__(
            f"{_where(record_id, field_path)}variant payload is missing '{name}'.",
            record_id=record_id,
            field_path=field_path,
        )


class MissingFieldError(DecodeError):
    """Raised when a required record field is absent."""

    def __init__(self, record_id: str, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"record '{record_id}' is missing required field '{field_name}'.",
            record_id=record_id,
            field_path=field_name,
        )


class TypeMismatchError(DecodeError):
    """Raised when a field holds a value of the wrong type."""

    def __init__(self, record_id: str | None, field_name: str, expected: str, found: str) -> None:
        self.field_name = field_name
        self.expected = expected
        self.found = found
        super().__init__(
            f"{_where(record_id, field_name)}expected {expected}, found {found}.",
            record_id=record_id,
            field_path=field_name,
        )


class RegistryError(DataError):
    """Base exception for registry construction failures."""


class DuplicateIdentifierError(RegistryError):
    """Raised when one table lists the same identifier twice."""

    def __init__(self, table: str, identifier: str) -> None:
        self.table = table
        self.identifier = identifier
        super().__init__(f"Duplicate identifier '{identifier}' in {table} table.")


class InvalidRegistryError(RegistryError):
    """Raised when validation reports fatal diagnostics; carries every diagnostic."""

    def __init__(self, diagnostics: Sequence["Diagnostic"]) -> None:
        self.diagnostics = list(diagnostics)
        fatal_count = sum(1 for diagnostic in self.diagnostics if diagnostic.is_fatal)
        super().__init__(f"Registry construction failed with {fatal_count} fatal diagnostic(s).")

    @property
    def fatal(self) -> list["Diagnostic"]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.is_fatal]


class UnknownDefinitionError(KeyError):
    """Raised by query helpers when an identifier is not registered."""

    def __init__(self, table: str, identifier: str) -> None:
        self.table = table
        self.identifier = identifier
        super().__init__(identifier)


def _where(record_id: str | None, field_path: str | None) -> str:
    if record_id is not None and field_path:
        return f"record '{record_id}' field '{field_path}': "
    if record_id is not None:
        return f"record '{record_id}': "
    if field_path:
        return f"field '{field_path}': "
    return ""
