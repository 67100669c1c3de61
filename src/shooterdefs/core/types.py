"""Shared type aliases for the core and domain layers."""
from typing import Literal

Identifier = str
TableName = Literal["weapons", "bots"]
Severity = Literal["FATAL", "WARNING"]

FATAL: Severity = "FATAL"
WARNING: Severity = "WARNING"

__all__ = ["FATAL", "Identifier", "Severity", "TableName", "WARNING"]
