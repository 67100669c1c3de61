"""Decoding of tagged variants (damage and projectile models).

Variants use the externally tagged form ``{"Tag": payload}``.
"""
from __future__ import annotations

from typing import Mapping

from shooterdefs.data.errors import (
    MissingPayloadFieldError,
    TypeMismatchError,
    UnknownVariantError,
)
from shooterdefs.domain.defs import (
    Damage,
    PointDamage,
    Projectile,
    ProjectileKind,
    ProjectileModel,
    Ray,
    SplashDamage,
)

from .base import describe_value, require_float, require_mapping

_PROJECTILE_KINDS = {kind.value: kind for kind in ProjectileKind}


def split_tagged(value: object, record_id: str | None, path: str) -> tuple[str, object]:
    """Return ``(tag, payload)``; a bare string is a tag with no payload."""
    if isinstance(value, str):
        return value, None
    if isinstance(value, Mapping) and len(value) == 1:
        ((tag, payload),) = value.items()
        if isinstance(tag, str):
            return tag, payload
    raise TypeMismatchError(record_id, path, "tagged variant", describe_value(value))


def decode_damage(value: object, *, record_id: str | None = None, path: str = "damage") -> Damage:
    tag, payload = split_tagged(value, record_id, path)
    if tag == PointDamage.TAG:
        return PointDamage(amount=_scalar_or_field(payload, "amount", record_id, f"{path}.{tag}"))
    if tag == SplashDamage.TAG:
        data = _payload_mapping(payload, "amount", record_id, f"{path}.{tag}")
        return SplashDamage(
            amount=_payload_float(data, "amount", record_id, f"{path}.{tag}"),
            radius=_payload_float(data, "radius", record_id, f"{path}.{tag}"),
        )
    raise UnknownVariantError(tag, record_id=record_id, field_path=path)


def decode_projectile(
    value: object, *, record_id: str | None = None, path: str = "projectile"
) -> ProjectileModel:
    tag, payload = split_tagged(value, record_id, path)
    if tag == Ray.TAG:
        data = _payload_mapping(payload, "damage", record_id, f"{path}.{tag}")
        if "damage" not in data:
            raise MissingPayloadFieldError("damage", record_id=record_id, field_path=f"{path}.{tag}")
        return Ray(damage=decode_damage(data["damage"], record_id=record_id, path=f"{path}.{tag}.damage"))
    if tag == Projectile.TAG:
        kind_path = f"{path}.{tag}"
        if isinstance(payload, Mapping):
            if "kind" not in payload:
                raise MissingPayloadFieldError("kind", record_id=record_id, field_path=kind_path)
            payload = payload["kind"]
            kind_path = f"{kind_path}.kind"
        if payload is None:
            raise MissingPayloadFieldError("kind", record_id=record_id, field_path=kind_path)
        if not isinstance(payload, str):
            raise TypeMismatchError(record_id, kind_path, "projectile kind", describe_value(payload))
        try:
            kind = _PROJECTILE_KINDS[payload]
        except KeyError as exc:
            raise UnknownVariantError(payload, record_id=record_id, field_path=kind_path) from exc
        return Projectile(kind=kind)
    raise UnknownVariantError(tag, record_id=record_id, field_path=path)


def _scalar_or_field(payload: object, name: str, record_id: str | None, path: str) -> float:
    if isinstance(payload, Mapping):
        return _payload_float(payload, name, record_id, path)
    if payload is None:
        raise MissingPayloadFieldError(name, record_id=record_id, field_path=path)
    return require_float(payload, record_id, path)


def _payload_mapping(
    payload: object, first_field: str, record_id: str | None, path: str
) -> Mapping[str, object]:
    if payload is None:
        raise MissingPayloadFieldError(first_field, record_id=record_id, field_path=path)
    return require_mapping(payload, record_id, path)


def _payload_float(data: Mapping[str, object], name: str, record_id: str | None, path: str) -> float:
    if name not in data:
        raise MissingPayloadFieldError(name, record_id=record_id, field_path=path)
    return require_float(data[name], record_id, f"{path}.{name}")
