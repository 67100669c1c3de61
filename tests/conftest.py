from __future__ import annotations

import pytest


def make_glock_record() -> dict[str, object]:
    return {
        "model": "data/models/glock.FBX",
        "shot_sounds": ["data/sounds/shot_1.ogg", "data/sounds/shot_2.ogg"],
        "projectile": {"Ray": {"damage": {"Point": 10.0}}},
        "shoot_interval": 0.3,
        "yaw_correction": -90.0,
        "pitch_correction": 0.0,
        "ammo_indicator_offset": [-0.095, 0.045, 0.0],
        "ammo_consumption_per_shot": 1,
        "v_recoil": [-2.0, 4.0],
        "h_recoil": [-1.0, 1.0],
    }


def make_plasma_rifle_record() -> dict[str, object]:
    record = make_glock_record()
    record.update(
        {
            "model": "data/models/plasma_rifle.FBX",
            "shot_sounds": ["data/sounds/plasma_shot.ogg"],
            "projectile": {"Projectile": "Plasma"},
            "shoot_interval": 0.25,
            "ammo_consumption_per_shot": 10,
        }
    )
    return record


def make_mutant_record() -> dict[str, object]:
    return {
        "model": "data/models/mutant.FBX",
        "attack_animations": [
            {
                "path": "data/animations/mutant/attack.fbx",
                "timestamp": 0.6,
                "damage": {"Point": 20.0},
                "speed": 1.0,
            },
            {
                "path": "data/animations/mutant/attack2.fbx",
                "timestamp": 0.5,
                "damage": {"Point": 15.0},
                "speed": 1.25,
            },
        ],
        "scream_animation": "data/animations/mutant/scream.fbx",
        "idle_animation": "data/animations/mutant/idle.fbx",
        "walk_animation": "data/animations/mutant/walk.fbx",
        "aim_animation": "",
        "dying_animation": "data/animations/mutant/dying.fbx",
        "weapon_hand_name": "Mutant:RightHand",
        "left_leg_name": "Mutant:LeftUpLeg",
        "right_leg_name": "Mutant:RightUpLeg",
        "hips": "Mutant:Hips",
        "spine": "",
        "walk_speed": 1.2,
        "scale": 0.0085,
        "weapon_scale": 1.9,
        "health": 100.0,
        "v_aim_angle_hack": -2.0,
        "can_use_weapons": False,
        "close_combat_distance": 1.2,
        "pain_sounds": ["data/sounds/mutant/pain1.ogg"],
        "scream_sounds": ["data/sounds/mutant/scream1.ogg"],
        "idle_sounds": [],
    }


def make_zombie_record() -> dict[str, object]:
    record = make_mutant_record()
    record.update(
        {
            "model": "data/models/zombie.FBX",
            "aim_animation": "data/animations/zombie/aim.fbx",
            "spine": "Zombie:Spine",
            "can_use_weapons": True,
            "health": 150.0,
        }
    )
    return record


@pytest.fixture
def glock_record() -> dict[str, object]:
    return make_glock_record()


@pytest.fixture
def plasma_rifle_record() -> dict[str, object]:
    return make_plasma_rifle_record()


@pytest.fixture
def mutant_record() -> dict[str, object]:
    return make_mutant_record()


@pytest.fixture
def zombie_record() -> dict[str, object]:
    return make_zombie_record()
