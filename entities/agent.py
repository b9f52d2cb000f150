"""
Pursuing agents
Each agent takes one greedy step toward the player per tick
"""

from utils.helpers import sign


class Agent:
    """
    A pursuer with no state beyond its position
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def position(self):
        return (self.x, self.y)

    def plan_steps(self, target_x, target_y, rng):
        """
        Candidate steps toward the target, in the order they are tried

        When the target is off both axes the agent flips a coin for which
        axis to try first and keeps the other as a fallback. When the target
        is in line only that axis is tried.

        Returns:
            List of (dx, dy) unit steps, empty when already on the target
        """
        dx = sign(target_x - self.x)
        dy = sign(target_y - self.y)

        if dx != 0 and dy != 0:
            horizontal_first = rng.choice([True, False])
            if horizontal_first:
                return [(dx, 0), (0, dy)]
            return [(0, dy), (dx, 0)]
        if dx != 0:
            return [(dx, 0)]
        if dy != 0:
            return [(0, dy)]
        return []

    def step_toward(self, target_x, target_y, is_blocked, rng):
        """
        Take the first open candidate step toward the target

        Args:
            target_x, target_y: Position to pursue
            is_blocked: Callable (x, y) -> bool
            rng: random.Random instance

        Returns:
            True if the agent moved
        """
        for dx, dy in self.plan_steps(target_x, target_y, rng):
            nx, ny = self.x + dx, self.y + dy
            if not is_blocked(nx, ny):
                self.x, self.y = nx, ny
                return True
        return False

    def __eq__(self, other):
        if not isinstance(other, Agent):
            return NotImplemented
        return self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __repr__(self):
        return f"Agent(pos=({self.x},{self.y}))"


class AgentManager:
    """
    Manages all agents in the level
    """
    def __init__(self):
        self.agents = []

    def add_agent(self, x, y):
        """Add an agent to the level"""
        agent = Agent(x, y)
        self.agents.append(agent)
        return agent

    def is_agent_at(self, x, y):
        return any(agent.x == x and agent.y == y for agent in self.agents)

    def positions(self):
        return [agent.position for agent in self.agents]

    def clear(self):
        """Remove all agents"""
        self.agents.clear()

    def __len__(self):
        return len(self.agents)

    def __iter__(self):
        return iter(self.agents)

    def __repr__(self):
        return f"AgentManager(agents={len(self.agents)})"
