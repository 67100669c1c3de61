import copy
import threading

import pytest

from shooterdefs.data.errors import InvalidRegistryError
from shooterdefs.services.registry import build_registry
from shooterdefs.services.registry_handle import RegistryHandle


def test_reader_snapshot_survives_publish(glock_record, mutant_record) -> None:
    first, _ = build_registry({"Glock": glock_record}, {"Mutant": mutant_record})
    handle = RegistryHandle(first)
    held = handle.current()

    faster = copy.deepcopy(glock_record)
    faster["shoot_interval"] = 0.1
    handle.reload({"Glock": faster}, {})

    assert held is first
    assert held.lookup_weapon("Glock").shoot_interval == 0.3
    assert held.lookup_bot("Mutant") is not None
    assert handle.current().lookup_weapon("Glock").shoot_interval == 0.1
    assert handle.current().lookup_bot("Mutant") is None
    assert handle.version == 2


def test_failed_reload_keeps_current_snapshot(glock_record) -> None:
    first, _ = build_registry({"Glock": glock_record}, {})
    handle = RegistryHandle(first)
    broken = copy.deepcopy(glock_record)
    broken["shoot_interval"] = 0.0

    with pytest.raises(InvalidRegistryError):
        handle.reload({"Glock": broken}, {})

    assert handle.current() is first
    assert handle.version == 1


def test_reload_returns_warnings(glock_record) -> None:
    first, _ = build_registry({}, {})
    handle = RegistryHandle(first)
    glock_record["shot_sounds"] = []
    warnings = handle.reload({"Glock": glock_record}, {})
    assert [item.code for item in warnings] == ["EMPTY_SHOT_SOUNDS"]


def test_concurrent_readers_always_see_whole_snapshots(glock_record, mutant_record) -> None:
    small, _ = build_registry({"Glock": glock_record}, {})
    large, _ = build_registry({"Glock": glock_record}, {"Mutant": mutant_record})
    handle = RegistryHandle(small)
    observed: list[tuple[int, int]] = []
    stop = threading.Event()

    def reader() -> None:
        while not stop.is_set():
            snapshot = handle.current()
            observed.append((len(snapshot.weapon_ids()), len(snapshot.bot_ids())))

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for index in range(200):
        handle.publish(large if index % 2 == 0 else small)
    stop.set()
    for thread in threads:
        thread.join()

    assert set(observed) <= {(1, 0), (1, 1)}
    assert handle.version == 201
