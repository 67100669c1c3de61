import pytest

from shooterdefs.data.decoders import decode_damage, decode_projectile
from shooterdefs.data.errors import (
    MissingPayloadFieldError,
    TypeMismatchError,
    UnknownVariantError,
)
from shooterdefs.domain.defs import (
    PointDamage,
    Projectile,
    ProjectileKind,
    Ray,
    SplashDamage,
    damage_amount,
    describe_projectile,
)


def test_point_damage_accepts_scalar_and_mapping_payloads() -> None:
    assert decode_damage({"Point": 10.0}) == PointDamage(amount=10.0)
    assert decode_damage({"Point": {"amount": 7}}) == PointDamage(amount=7.0)


def test_splash_damage_decodes_amount_and_radius() -> None:
    damage = decode_damage({"Splash": {"amount": 30.0, "radius": 2.5}})
    assert damage == SplashDamage(amount=30.0, radius=2.5)
    assert damage_amount(damage) == 30.0


def test_splash_damage_missing_radius_names_the_field() -> None:
    with pytest.raises(MissingPayloadFieldError) as excinfo:
        decode_damage({"Splash": {"amount": 30.0}}, record_id="Rocket")
    assert excinfo.value.name == "radius"
    assert excinfo.value.record_id == "Rocket"


def test_point_damage_without_payload_is_incomplete() -> None:
    with pytest.raises(MissingPayloadFieldError) as excinfo:
        decode_damage("Point")
    assert excinfo.value.name == "amount"


def test_unknown_damage_tag_is_rejected() -> None:
    with pytest.raises(UnknownVariantError) as excinfo:
        decode_damage({"Poison": 3.0})
    assert excinfo.value.tag == "Poison"


def test_damage_amount_must_be_numeric() -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        decode_damage({"Point": "ten"}, record_id="Glock", path="projectile.Ray.damage")
    assert excinfo.value.expected == "number"
    assert excinfo.value.found == "string"


def test_boolean_is_not_a_damage_amount() -> None:
    with pytest.raises(TypeMismatchError):
        decode_damage({"Point": True})


def test_multi_key_mapping_is_not_a_variant() -> None:
    with pytest.raises(TypeMismatchError):
        decode_damage({"Point": 1.0, "Splash": {"amount": 1.0, "radius": 1.0}})


def test_ray_projectile_carries_damage() -> None:
    model = decode_projectile({"Ray": {"damage": {"Point": 10.0}}})
    assert model == Ray(damage=PointDamage(amount=10.0))
    assert describe_projectile(model) == "Ray(Point 10)"


def test_ray_without_damage_is_incomplete() -> None:
    with pytest.raises(MissingPayloadFieldError) as excinfo:
        decode_projectile({"Ray": {}})
    assert excinfo.value.name == "damage"


def test_ray_with_nested_unknown_damage_reports_nested_path() -> None:
    with pytest.raises(UnknownVariantError) as excinfo:
        decode_projectile({"Ray": {"damage": {"Laser": 1.0}}}, record_id="Glock")
    assert excinfo.value.field_path == "projectile.Ray.damage"


@pytest.mark.parametrize("payload", ["Plasma", {"kind": "Plasma"}])
def test_projectile_kind_forms(payload: object) -> None:
    model = decode_projectile({"Projectile": payload})
    assert model == Projectile(kind=ProjectileKind.PLASMA)
    assert describe_projectile(model) == "Projectile(Plasma)"


def test_unknown_projectile_kind_is_rejected() -> None:
    with pytest.raises(UnknownVariantError) as excinfo:
        decode_projectile({"Projectile": "Arrow"})
    assert excinfo.value.tag == "Arrow"


def test_projectile_without_kind_is_incomplete() -> None:
    with pytest.raises(MissingPayloadFieldError) as excinfo:
        decode_projectile({"Projectile": {}})
    assert excinfo.value.name == "kind"


def test_unknown_projectile_tag_is_rejected() -> None:
    with pytest.raises(UnknownVariantError):
        decode_projectile({"Beam": {"damage": {"Point": 1.0}}})


def test_describe_projectile_rejects_foreign_types() -> None:
    with pytest.raises(TypeError):
        describe_projectile("Ray")  # type: ignore[arg-type]


def test_variant_tags_match_wire_names() -> None:
    assert (PointDamage.TAG, SplashDamage.TAG) == ("Point", "Splash")
    assert (Ray.TAG, Projectile.TAG) == ("Ray", "Projectile")
    assert Projectile.__doc__
