import pytest

from shooterdefs.data.errors import UnknownDefinitionError
from shooterdefs.domain.defs import PointDamage, Projectile, ProjectileKind, Ray
from shooterdefs.services.queries import DefinitionQueries, SoundEvent
from shooterdefs.services.registry import build_registry


@pytest.fixture
def queries(glock_record, plasma_rifle_record, mutant_record, zombie_record) -> DefinitionQueries:
    registry, _ = build_registry(
        {"Glock": glock_record, "PlasmaRifle": plasma_rifle_record},
        {"Mutant": mutant_record, "Zombie": zombie_record},
    )
    return DefinitionQueries(registry)


def test_projectile_queries(queries: DefinitionQueries) -> None:
    assert queries.projectile("Glock") == Ray(damage=PointDamage(amount=10.0))
    assert queries.projectile("PlasmaRifle") == Projectile(kind=ProjectileKind.PLASMA)
    assert queries.shot_sounds("PlasmaRifle") == ("data/sounds/plasma_shot.ogg",)


def test_unknown_identifier_raises_key_error(queries: DefinitionQueries) -> None:
    with pytest.raises(UnknownDefinitionError) as excinfo:
        queries.weapon("Railgun")
    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.table == "weapons"
    with pytest.raises(KeyError):
        queries.bot("Spider")


def test_capability_queries_never_return_empty_strings(queries: DefinitionQueries) -> None:
    assert queries.uses_weapon_logic("Mutant") is False
    assert queries.aim_animation("Mutant") is None
    assert queries.spine_bone("Mutant") is None
    assert queries.uses_weapon_logic("Zombie") is True
    assert queries.aim_animation("Zombie") == "data/animations/zombie/aim.fbx"
    assert queries.spine_bone("Zombie") == "Zombie:Spine"


def test_bot_sounds_by_event(queries: DefinitionQueries) -> None:
    assert queries.bot_sounds("Mutant", SoundEvent.PAIN) == ("data/sounds/mutant/pain1.ogg",)
    assert queries.bot_sounds("Mutant", SoundEvent.SCREAM) == ("data/sounds/mutant/scream1.ogg",)
    assert queries.bot_sounds("Mutant", SoundEvent.IDLE) == ()


def test_attack_animations_are_ordered(queries: DefinitionQueries) -> None:
    attacks = queries.attack_animations("Mutant")
    assert [attack.timestamp for attack in attacks] == [0.6, 0.5]
