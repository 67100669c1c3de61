"""Validation findings reported during registry construction."""
from __future__ import annotations

from dataclasses import dataclass

from shooterdefs.core.types import FATAL, WARNING, Severity, TableName


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    code: str
    message: str
    table: TableName
    record_id: str | None = None
    field_path: str | None = None

    @property
    def is_fatal(self) -> bool:
        return self.severity == FATAL


def fatal(
    code: str,
    message: str,
    table: TableName,
    record_id: str | None,
    field_path: str | None = None,
) -> Diagnostic:
    return Diagnostic(FATAL, code, message, table, record_id, field_path)


def warning(
    code: str,
    message: str,
    table: TableName,
    record_id: str | None,
    field_path: str | None = None,
) -> Diagnostic:
    return Diagnostic(WARNING, code, message, table, record_id, field_path)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    context = {"table": diagnostic.table, "id": diagnostic.record_id, "field": diagnostic.field_path}
    details = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
    suffix = f" ({details})" if details else ""
    return f"[{diagnostic.severity}] {diagnostic.code}: {diagnostic.message}{suffix}"


def split_by_severity(diagnostics: list[Diagnostic]) -> tuple[list[Diagnostic], list[Diagnostic]]:
    """Return ``(fatal, warnings)`` keeping the original order."""
    fatal_items = [item for item in diagnostics if item.is_fatal]
    warning_items = [item for item in diagnostics if not item.is_fatal]
    return fatal_items, warning_items
