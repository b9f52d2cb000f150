import pytest

from entities.pickup import PickupKind
from entities.player import Direction
from game.observer import ObserverRegistry, WorldObserver
from utils.exceptions import ObserverReentryError

CORRIDOR = [
    "#######",
    "#.....#",
    "#######",
]


class CountingView(WorldObserver):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_world_changed(self, world):
        self.log.append(self.name)


def test_registration_sends_initial_snapshot(easy_world, recorder):
    easy_world.register_observer(recorder)
    assert recorder.calls == [(easy_world.health, easy_world.player_pos, 1)]


def test_observers_called_in_registration_order(easy_world):
    log = []
    easy_world.register_observer(CountingView("a", log))
    easy_world.register_observer(CountingView("b", log))
    log.clear()

    easy_world.set_paused(True)
    assert log == ["a", "b"]


def test_observer_receives_live_world(easy_world):
    seen = []
    easy_world.register_observer(seen.append)
    easy_world.set_paused(True)
    assert all(world is easy_world for world in seen)


def test_one_notification_per_operation(layout_world, recorder):
    world = layout_world(CORRIDOR, player=(1, 1), exit_pos=(5, 1), agents=[(4, 1)],
                         pickups=[(2, 1, PickupKind.INVINCIBILITY)])
    world.register_observer(recorder)
    recorder.calls.clear()

    world.move_player(Direction.RIGHT)
    assert len(recorder.calls) == 1
    world.move_agents()
    assert len(recorder.calls) == 2
    world.decay_effects(50)
    assert len(recorder.calls) == 3
    world.set_paused(True)
    assert len(recorder.calls) == 4


def test_decay_without_active_effect_is_silent(easy_world, recorder):
    easy_world.register_observer(recorder)
    recorder.calls.clear()

    easy_world.decay_effects(50)
    assert recorder.calls == []


def test_level_advance_notifies_with_new_level(layout_world, recorder):
    world = layout_world(CORRIDOR, player=(4, 1), exit_pos=(5, 1), health=2)
    world.register_observer(recorder)
    recorder.calls.clear()

    world.move_player(Direction.RIGHT)
    assert len(recorder.calls) == 1
    assert recorder.calls[0][2] == 2
    assert recorder.calls[0][0] == 2


def test_unregistered_observer_is_not_called(easy_world, recorder):
    handle = easy_world.register_observer(recorder)
    easy_world.unregister_observer(handle)
    recorder.calls.clear()

    easy_world.set_paused(True)
    assert recorder.calls == []


def test_mutating_from_callback_is_rejected(easy_world):
    def meddling(world):
        world.move_agents()

    with pytest.raises(ObserverReentryError):
        easy_world.register_observer(meddling)

    easy_world.unregister_observer(meddling)
    # The guard is released again after the failed notification
    easy_world.set_paused(True)
    assert easy_world.paused


def test_registry_rejects_non_callables():
    registry = ObserverRegistry()
    with pytest.raises(TypeError):
        registry.register(object())


def test_base_observer_must_be_overridden():
    with pytest.raises(NotImplementedError):
        WorldObserver().on_world_changed(None)


def test_registry_rejects_bare_base_observer(easy_world):
    registry = ObserverRegistry()
    with pytest.raises(TypeError):
        registry.register(WorldObserver())

    with pytest.raises(TypeError):
        easy_world.register_observer(WorldObserver())
    easy_world.set_paused(True)
    assert easy_world.paused
