"""Data layer utilities for loading and decoding definitions."""

from .config import ValidationThresholds, load_thresholds
from .errors import (
    DataError,
    DataLoadError,
    DataValidationError,
    DecodeError,
    DuplicateIdentifierError,
    InvalidRegistryError,
    MissingFieldError,
    MissingPayloadFieldError,
    RegistryError,
    TypeMismatchError,
    UnknownDefinitionError,
    UnknownVariantError,
)
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "DecodeError",
    "DuplicateIdentifierError",
    "InvalidRegistryError",
    "MissingFieldError",
    "MissingPayloadFieldError",
    "RegistryError",
    "TypeMismatchError",
    "UnknownDefinitionError",
    "UnknownVariantError",
    "ValidationThresholds",
    "get_definitions_path",
    "get_repo_root",
    "load_thresholds",
]
