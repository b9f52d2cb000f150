from entities.pickup import PickupKind
from entities.player import Direction
from game.game_state import GameClock, GameState

# Easy, level 1: agents tick every 1500 ms
LONG_CORRIDOR = [
    "###########",
    "#.........#",
    "###########",
]


def test_agents_tick_at_level_interval(layout_world):
    world = layout_world(LONG_CORRIDOR, player=(1, 1), exit_pos=(9, 1), agents=[(8, 1)])
    clock = GameClock(world)

    assert clock.update(1499) == (0, 29)
    assert world.agents == [(8, 1)]

    agent_ticks, _ = clock.update(1)
    assert agent_ticks == 1
    assert world.agents == [(7, 1)]

    agent_ticks, _ = clock.update(3000)
    assert agent_ticks == 2
    assert world.agents == [(5, 1)]


def test_decay_runs_on_its_own_cadence(layout_world):
    world = layout_world(LONG_CORRIDOR, player=(1, 1), exit_pos=(9, 1),
                         pickups=[(2, 1, PickupKind.INVINCIBILITY)])
    world.move_player(Direction.RIGHT)
    clock = GameClock(world)

    clock.update(120)
    assert world.invincible_remaining_ms == 2400
    clock.update(30)
    assert world.invincible_remaining_ms == 2350
    clock.update(5000)
    assert not world.is_invincible


def test_frozen_agents_skip_ticks(layout_world):
    world = layout_world(LONG_CORRIDOR, player=(1, 1), exit_pos=(9, 1), agents=[(8, 1)],
                         pickups=[(2, 1, PickupKind.FREEZE_AGENTS)])
    world.move_player(Direction.RIGHT)
    clock = GameClock(world)

    clock.update(3000)
    assert world.agents == [(8, 1)]
    assert world.agents_frozen

    clock.update(1500)
    assert not world.agents_frozen
    assert world.agents == [(7, 1)]


def test_clock_idle_while_paused_or_over(layout_world):
    world = layout_world(LONG_CORRIDOR, player=(1, 1), exit_pos=(9, 1), agents=[(2, 1)], health=1)
    clock = GameClock(world)

    world.set_paused(True)
    assert clock.update(10000) == (0, 0)
    world.set_paused(False)

    clock.update(1500)
    assert world.state is GameState.GAME_OVER
    assert clock.update(10000) == (0, 0)
    assert world.agents == [(1, 1)]


def test_reset_drops_accumulated_time(layout_world):
    world = layout_world(LONG_CORRIDOR, player=(1, 1), exit_pos=(9, 1), agents=[(8, 1)])
    clock = GameClock(world)

    clock.update(1400)
    clock.reset()
    assert clock.update(200) == (0, 4)
    assert world.agents == [(8, 1)]
