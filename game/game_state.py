"""
Game states and a headless clock that drives the world's two cadences
"""

from enum import Enum, auto

from utils.constants import EFFECT_DECAY_INTERVAL_MS


class GameState(Enum):
    """Game states"""
    ACTIVE = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class GameClock:
    """
    Turns elapsed wall-clock time into agent ticks and effect decay

    The world holds no timers. A driver that has no timer facility of its
    own can feed elapsed milliseconds here instead. Agent ticks follow
    world.agent_interval_ms, which changes with the level, and effect
    decay runs every decay_interval_ms. Both cadences are independent and
    all calls happen on the caller's thread.
    """
    def __init__(self, world, decay_interval_ms=EFFECT_DECAY_INTERVAL_MS):
        """
        Args:
            world: World instance
            decay_interval_ms: Effect decay period in milliseconds
        """
        self.world = world
        self.decay_interval_ms = decay_interval_ms
        self.agent_elapsed_ms = 0
        self.decay_elapsed_ms = 0

    def reset(self):
        """Restart both cadences, e.g. after a restart or resume"""
        self.agent_elapsed_ms = 0
        self.decay_elapsed_ms = 0

    def update(self, dt_ms):
        """
        Advance by dt_ms milliseconds

        Returns:
            (agent_ticks, decay_ticks) performed
        """
        if self.world.state is not GameState.ACTIVE:
            return 0, 0

        agent_ticks = 0
        decay_ticks = 0

        self.decay_elapsed_ms += dt_ms
        while self.decay_elapsed_ms >= self.decay_interval_ms:
            self.decay_elapsed_ms -= self.decay_interval_ms
            self.world.decay_effects(self.decay_interval_ms)
            decay_ticks += 1

        self.agent_elapsed_ms += dt_ms
        while self.agent_elapsed_ms >= self.world.agent_interval_ms:
            self.agent_elapsed_ms -= self.world.agent_interval_ms
            # Frozen agents skip the tick
            if not self.world.agents_frozen:
                self.world.move_agents()
            agent_ticks += 1
            if self.world.state is not GameState.ACTIVE:
                self.agent_elapsed_ms = 0
                break

        return agent_ticks, decay_ticks

    def __repr__(self):
        return (f"GameClock(agent_elapsed={self.agent_elapsed_ms}ms, "
                f"decay_elapsed={self.decay_elapsed_ms}ms)")
