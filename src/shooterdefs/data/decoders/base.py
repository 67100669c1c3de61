"""Base decoder turning raw mappings into typed definitions."""
from __future__ import annotations

from numbers import Real
from typing import Generic, Mapping, TypeVar

from shooterdefs.data.errors import MissingFieldError, TypeMismatchError
from shooterdefs.domain.defs import Range2, Vector3

T = TypeVar("T")

RECORD_FIELD = "(record)"


def describe_value(value: object) -> str:
    """Name a decoded-tree value the way content authors think about it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def require_float(value: object, record_id: str | None, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeMismatchError(record_id, path, "number", describe_value(value))
    try:
        return float(value)
    except OverflowError as exc:
        raise TypeMismatchError(record_id, path, "finite number", "integer out of range") from exc


def require_mapping(value: object, record_id: str | None, path: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(record_id, path, "mapping", describe_value(value))
    return value


class DecoderBase(Generic[T]):
    """Common field access and type checks for record decoders.

    Decoding never looks at other records; uniqueness is the registry's job.
    """

    def decode(self, record_id: str, raw: object) -> T:
        """Decode one raw record, raising a DecodeError subclass on failure."""
        data = require_mapping(raw, record_id, RECORD_FIELD)
        return self._build(record_id, data)

    def _build(self, record_id: str, data: Mapping[str, object]) -> T:
        """Convert a raw mapping into a typed definition."""
        raise NotImplementedError

    @staticmethod
    def _field(data: Mapping[str, object], record_id: str, name: str) -> object:
        if name not in data:
            raise MissingFieldError(record_id, name)
        return data[name]

    @staticmethod
    def _require_str(value: object, record_id: str, path: str) -> str:
        if not isinstance(value, str):
            raise TypeMismatchError(record_id, path, "string", describe_value(value))
        return value

    @staticmethod
    def _optional_str(value: object, record_id: str, path: str) -> str | None:
        """Decode an optional path; absent, null and blank strings all mean "not present"."""
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeMismatchError(record_id, path, "string or null", describe_value(value))
        return value if value.strip() else None

    @staticmethod
    def _require_float(value: object, record_id: str, path: str) -> float:
        return require_float(value, record_id, path)

    @staticmethod
    def _require_int(value: object, record_id: str, path: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatchError(record_id, path, "integer", describe_value(value))
        return value

    @staticmethod
    def _require_bool(value: object, record_id: str, path: str) -> bool:
        if not isinstance(value, bool):
            raise TypeMismatchError(record_id, path, "boolean", describe_value(value))
        return value

    @staticmethod
    def _require_list(value: object, record_id: str, path: str) -> list[object]:
        if not isinstance(value, (list, tuple)):
            raise TypeMismatchError(record_id, path, "sequence", describe_value(value))
        return list(value)

    def _require_str_list(self, value: object, record_id: str, path: str) -> tuple[str, ...]:
        items = self._require_list(value, record_id, path)
        return tuple(
            self._require_str(item, record_id, f"{path}[{index}]") for index, item in enumerate(items)
        )

    def _require_numbers(self, value: object, record_id: str, path: str, count: int) -> list[float]:
        items = self._require_list(value, record_id, path)
        if len(items) != count:
            raise TypeMismatchError(
                record_id, path, f"sequence of {count} numbers", f"sequence of {len(items)}"
            )
        return [require_float(item, record_id, f"{path}[{index}]") for index, item in enumerate(items)]

    def _require_vector3(self, value: object, record_id: str, path: str) -> Vector3:
        x, y, z = self._require_numbers(value, record_id, path, 3)
        return Vector3(x=x, y=y, z=z)

    def _require_range2(self, value: object, record_id: str, path: str) -> Range2:
        low, high = self._require_numbers(value, record_id, path, 2)
        return Range2(min=low, max=high)
